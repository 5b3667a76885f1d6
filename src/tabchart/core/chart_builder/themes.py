"""Theme application: styling plus title and legend placement."""

import altair as alt

from tabchart.core.enums import Side
from tabchart.core.models import PlotOptions

from .colors import FONT_STACK, QUALITATIVE_10, StructuralColors, TextColors


class Theme:
    """Applies consistent styling to a finished chart."""

    def __init__(self) -> None:
        self.structural = StructuralColors()
        self.text = TextColors()

    def apply_to_chart(self, chart: alt.Chart, options: PlotOptions) -> alt.Chart:
        """Apply styling and the title/legend options.

        Args:
            chart: Altair chart object
            options: Plot options carrying title and legend settings

        Returns:
            Configured chart
        """
        if options.title:
            chart = chart.properties(title=alt.TitleParams(text=options.title, orient=options.title_side.value))

        configured: alt.Chart = (
            chart.configure(background=self.structural.BACKGROUND, padding=20)
            .configure_axis(
                domainColor=self.structural.AXIS_LINE,
                grid=False,
                labelColor=self.text.AXIS_LABEL,
                labelFont=FONT_STACK,
                labelFontSize=12,
                tickColor=self.structural.TICK_LINE,
                titleColor=self.text.AXIS_LABEL,
                titleFont=FONT_STACK,
                titleFontSize=14,
                titleFontWeight="normal",
            )
            .configure_legend(
                disable=options.hide_legend,
                labelColor=self.text.LEGEND,
                labelFont=FONT_STACK,
                orient=self.legend_orient(options.legend_side),
                titleColor=self.text.LEGEND,
            )
            .configure_title(
                color=self.text.TITLE,
                font=FONT_STACK,
                fontSize=18,
                anchor="middle",
            )
            .configure_range(category=list(QUALITATIVE_10))
            .configure_view(strokeWidth=0)
        )
        return configured

    @staticmethod
    def legend_orient(side: Side) -> str:
        return side.value


default_theme = Theme()
