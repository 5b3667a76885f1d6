"""Scatter and bubble template for numeric x/y data."""

from typing import Any

import altair as alt

from tabchart.core.chart_builder.base import SERIES_KEY_FIELD, BaseTemplate
from tabchart.core.enums import MarkType
from tabchart.core.models import ChartData


class ScatterTemplate(BaseTemplate):
    """Numeric axes from the observed ranges; bubbles add a size channel."""

    marks = (MarkType.POINT, MarkType.BUBBLE)

    def build(self, data: ChartData, width: int = 800, height: int = 600) -> alt.Chart:
        chart_data = self.prepare_data_for_altair(self.to_frame(data))
        keys = self.series_keys(data)
        encodings: dict[str, Any] = {
            "x": alt.X(
                "x:Q",
                title=self.axis_title(data.x_axis),
                scale=self.numeric_scale(data.x_axis),
                axis=self.numeric_axis(data.x_axis),
            ),
            "y": alt.Y(
                "y:Q",
                title=self.axis_title(data.y_axis),
                scale=self.numeric_scale(data.y_axis),
                axis=self.numeric_axis(data.y_axis),
            ),
            "color": alt.Color(f"{SERIES_KEY_FIELD}:N", title=None, sort=keys),
        }
        if data.mark == MarkType.BUBBLE:
            encodings["size"] = alt.Size("size:Q", title=None)
            mark = alt.Chart(chart_data).mark_circle(opacity=0.6)
        else:
            mark = alt.Chart(chart_data).mark_point(filled=True, size=20)

        return mark.encode(**encodings).properties(width=width, height=height)  # type: ignore[no-any-return]
