"""Shared fixtures for chart builder tests."""

import pytest

from tabchart.core.enums import AxisKind, ChartKind, MarkType
from tabchart.core.models import AxisSpec, ChartData, DataPoint, Series


@pytest.fixture
def grouped_bars() -> ChartData:
    """Two series over the same three categories."""
    return ChartData(
        kind=ChartKind.HISTOGRAM,
        mark=MarkType.BAR,
        series=[
            Series(name="Bob", points=[DataPoint(x=year, y=v) for year, v in (("2018", 1), ("2019", 2), ("2020", 3))]),
            Series(name="Joe", points=[DataPoint(x=year, y=v) for year, v in (("2018", 4), ("2019", 0), ("2020", 6))]),
        ],
        x_axis=AxisSpec(kind=AxisKind.CATEGORICAL, label="Year"),
        y_axis=AxisSpec(kind=AxisKind.NUMERIC, label="Count"),
    )


@pytest.fixture
def scatter_points() -> ChartData:
    """Numeric points along the genome."""
    return ChartData(
        kind=ChartKind.BEDGRAPH,
        mark=MarkType.POINT,
        series=[
            Series(name="chr1", points=[DataPoint(x=150, y=5.0), DataPoint(x=600, y=2.0)]),
            Series(name="chr2", points=[DataPoint(x=1150, y=7.0)]),
        ],
        x_axis=AxisSpec(kind=AxisKind.NUMERIC, label="Genomic Index", lower=1, upper=1500, tick=149.9),
        y_axis=AxisSpec(kind=AxisKind.NUMERIC, lower=2.0, upper=7.0, tick=0.5),
    )
