"""Pie chart template for key/value data."""

import altair as alt

from tabchart.core.chart_builder.base import BaseTemplate
from tabchart.core.enums import MarkType
from tabchart.core.models import ChartData


class PieTemplate(BaseTemplate):
    """One slice per key, sized by its value."""

    marks = (MarkType.ARC,)

    def build(self, data: ChartData, width: int = 800, height: int = 600) -> alt.Chart:
        chart_data = self.prepare_data_for_altair(self.to_frame(data))
        keys = self.categories(data)
        chart = (
            alt.Chart(chart_data)
            .mark_arc()
            .encode(
                theta=alt.Theta("y:Q", stack=True),
                color=alt.Color("x:N", title=None, sort=keys),
                order=alt.Order("index:Q"),
                tooltip=[alt.Tooltip("x:N", title="key"), alt.Tooltip("y:Q", title="value")],
            )
            .transform_window(index="row_number()")
        )
        return chart.properties(width=width, height=height)  # type: ignore[no-any-return]
