"""Bar chart template: one bar series, grouped bars or stacked bars."""

from typing import Any

import altair as alt

from tabchart.core.chart_builder.base import SERIES_FIELD, SERIES_KEY_FIELD, BaseTemplate
from tabchart.core.enums import MarkType
from tabchart.core.models import ChartData


class BarTemplate(BaseTemplate):
    """Categorical x axis, value on y, one color per series."""

    marks = (MarkType.BAR,)

    def build(self, data: ChartData, width: int = 800, height: int = 600) -> alt.Chart:
        """Build a bar chart.

        Categories and series keep the order they were assembled in. Grouped
        bars are placed side by side with an x offset; stacked bars share a
        column. Color and offset follow the series key, so series with the
        same name still get their own bars.

        Args:
            data: Assembled chart data
            width: Chart width in pixels
            height: Chart height in pixels

        Returns:
            Altair bar chart
        """
        chart_data = self.prepare_data_for_altair(self.to_frame(data))
        categories = self.categories(data)
        keys = self.series_keys(data)

        encodings: dict[str, Any] = {
            "x": alt.X("x:N", title=self.axis_title(data.x_axis), sort=categories),
            "y": alt.Y(
                "y:Q",
                title=self.axis_title(data.y_axis),
                stack="zero" if data.stacked else None,
                scale=alt.Scale(zero=True),  # bars start at zero
            ),
            "color": alt.Color(f"{SERIES_KEY_FIELD}:N", title=None, sort=keys),
            "tooltip": [
                alt.Tooltip(f"{SERIES_FIELD}:N"),
                alt.Tooltip("x:N"),
                alt.Tooltip("y:Q"),
            ],
        }
        if data.stacked:
            encodings["order"] = alt.Order("series_rank:Q")
        elif len(keys) > 1:
            encodings["xOffset"] = alt.XOffset(f"{SERIES_KEY_FIELD}:N", sort=keys)

        chart = alt.Chart(chart_data).mark_bar()
        if data.stacked:
            chart = chart.transform_calculate(series_rank=self._rank_expression(keys))
        chart = chart.encode(**encodings)

        return chart.properties(width=width, height=height)  # type: ignore[no-any-return]

    @staticmethod
    def _rank_expression(keys: list[str]) -> str:
        # indexof over a literal array keeps the assembled series order when stacking
        literal = ", ".join(_quote(key) for key in keys)
        return f"indexof([{literal}], datum.{SERIES_KEY_FIELD})"


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"
