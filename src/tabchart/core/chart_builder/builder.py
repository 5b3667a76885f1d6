"""Chart builder: renders assembled chart data and exports it."""

import altair as alt

from tabchart.core.enums import MarkType, OutputFormat
from tabchart.core.errors import ChartBuildError, ExportError
from tabchart.core.models import ChartData, PlotOptions
from tabchart.infra.logging import get_logger

from .base import BaseTemplate
from .themes import Theme, default_theme

logger = get_logger(__name__)


class ChartBuilder:
    """Main chart builder class managing templates and rendering."""

    def __init__(self, theme: Theme | None = None) -> None:
        """Initialize chart builder."""
        self.theme = theme or default_theme
        self._templates: dict[MarkType, BaseTemplate] = {}
        self._initialize_templates()

    def _initialize_templates(self) -> None:
        from .templates import (  # noqa: PLC0415
            BarTemplate,
            PieTemplate,
            ScatterTemplate,
        )

        for template in (PieTemplate(), BarTemplate(), ScatterTemplate()):
            self.register_template(template)

    def register_template(self, template: BaseTemplate) -> None:
        """Register a template for each mark it draws.

        Args:
            template: Template instance
        """
        for mark in template.marks:
            self._templates[mark] = template
            logger.debug("Registered template", mark=mark.value, template=type(template).__name__)

    def get_template(self, mark: MarkType) -> BaseTemplate | None:
        return self._templates.get(mark)

    def build(
        self,
        data: ChartData,
        options: PlotOptions,
        width: int = 800,
        height: int = 600,
    ) -> alt.Chart:
        """Build a themed chart.

        Args:
            data: Assembled chart data
            options: Plot options (title, legend)
            width: Chart width
            height: Chart height

        Returns:
            Altair chart object

        Raises:
            ChartBuildError: If chart cannot be built
        """
        template = self._templates.get(data.mark)
        if template is None:
            msg = f"No template for mark: {data.mark.value}"
            raise ChartBuildError(msg)

        try:
            chart = template.build(data, width, height)
            return self.theme.apply_to_chart(chart, options)
        except Exception as e:
            msg = f"Failed to build chart: {e}"
            raise ChartBuildError(msg) from e

    def export(
        self,
        chart: alt.Chart,
        format: OutputFormat = OutputFormat.PNG,  # noqa: A002
        dpi: int = 150,
    ) -> str | bytes:
        """Export chart to the requested format.

        Args:
            chart: Altair chart object
            format: Output format
            dpi: DPI for PNG export

        Returns:
            PNG bytes, or SVG / Vega-Lite JSON text

        Raises:
            ExportError: If export fails
        """
        if format == OutputFormat.JSON:
            return chart.to_json()
        try:
            import vl_convert as vlc  # noqa: PLC0415
        except ImportError as e:
            msg = "vl-convert-python not installed"
            raise ExportError(msg, format=format.value) from e

        vega_lite_spec = chart.to_json()
        try:
            if format == OutputFormat.PNG:
                return vlc.vegalite_to_png(vl_spec=vega_lite_spec, scale=dpi / 96.0)
            return vlc.vegalite_to_svg(vl_spec=vega_lite_spec)
        except Exception as e:
            msg = f"{format.value.upper()} export failed: {e}"
            raise ExportError(msg, format=format.value) from e
