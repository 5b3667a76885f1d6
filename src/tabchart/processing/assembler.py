"""Maps an aggregate onto the series and axes of one chart kind.

Assembly is pure: no I/O and no validation beyond what ran during ingestion.
"""

from __future__ import annotations

from tabchart.core.aggregates import (
    Aggregate,
    AxisRange,
    CategoryMatrix,
    GenomicSeries,
    KeyedXYV,
    KeyValueMap,
    PointSeries,
)
from tabchart.core.enums import AxisKind, ChartKind, MarkType
from tabchart.core.errors import ChartBuildError
from tabchart.core.models import AxisSpec, ChartData, DataPoint, PlotOptions, Series

GENOMIC_AXIS_LABEL = "Genomic Index"
STACKED_KINDS = frozenset({ChartKind.SIMPLE_HISTOGRAM, ChartKind.STACKED_HISTOGRAM, ChartKind.STACKED_XYV})


def numeric_axis(value_range: AxisRange, label: str | None = None) -> AxisSpec:
    return AxisSpec(
        kind=AxisKind.NUMERIC,
        label=label,
        lower=value_range.lower,
        upper=value_range.upper,
        tick=value_range.tick,
    )


def _category_axes(options: PlotOptions) -> tuple[AxisSpec, AxisSpec]:
    return (
        AxisSpec(kind=AxisKind.CATEGORICAL, label=options.xlabel),
        AxisSpec(kind=AxisKind.NUMERIC, label=options.ylabel),
    )


def _key_values(kind: ChartKind, aggregate: KeyValueMap, options: PlotOptions) -> ChartData:
    series = Series(name=options.ylabel or "value", points=[DataPoint(x=key, y=value) for key, value in aggregate])
    if kind == ChartKind.PIE:
        return ChartData(kind=kind, mark=MarkType.ARC, series=[series])
    x_axis, y_axis = _category_axes(options)
    return ChartData(kind=kind, mark=MarkType.BAR, series=[series], x_axis=x_axis, y_axis=y_axis, stacked=True)


def _matrix(kind: ChartKind, aggregate: CategoryMatrix, options: PlotOptions) -> ChartData:
    series = [
        Series(name=row.name, points=[DataPoint(x=label, y=value) for label, value in row.values])
        for row in aggregate.rows
    ]
    x_axis, y_axis = _category_axes(options)
    return ChartData(
        kind=kind,
        mark=MarkType.BAR,
        series=series,
        x_axis=x_axis,
        y_axis=y_axis,
        stacked=kind in STACKED_KINDS,
    )


def _xyv(kind: ChartKind, aggregate: KeyedXYV, options: PlotOptions) -> ChartData:
    series = [
        Series(
            name=y_key,
            points=[DataPoint(x=x_key, y=aggregate.value(x_key, y_key)) for x_key in aggregate.x_keys],
        )
        for y_key in aggregate.y_keys
    ]
    x_axis, y_axis = _category_axes(options)
    return ChartData(
        kind=kind,
        mark=MarkType.BAR,
        series=series,
        x_axis=x_axis,
        y_axis=y_axis,
        stacked=kind in STACKED_KINDS,
    )


def _points(kind: ChartKind, aggregate: PointSeries, options: PlotOptions) -> ChartData:
    with_size = aggregate.arity > 2
    points = [DataPoint(x=p[0], y=p[1], size=p[2] if with_size else None) for p in aggregate.points]
    return ChartData(
        kind=kind,
        mark=MarkType.BUBBLE if with_size else MarkType.POINT,
        series=[Series(name=options.ylabel or "values", points=points)],
        x_axis=numeric_axis(aggregate.x_range, options.xlabel),
        y_axis=numeric_axis(aggregate.y_range, options.ylabel),
    )


def _genomic(kind: ChartKind, aggregate: GenomicSeries, options: PlotOptions) -> ChartData:
    series = [
        Series(name=contig.name, points=[DataPoint(x=position, y=value) for position, value in contig.points])
        for contig in aggregate.contigs
    ]
    x_axis = numeric_axis(AxisRange(1, aggregate.reference_length), options.xlabel or GENOMIC_AXIS_LABEL)
    return ChartData(
        kind=kind,
        mark=MarkType.POINT,
        series=series,
        x_axis=x_axis,
        y_axis=numeric_axis(aggregate.value_range, options.ylabel),
    )


_ASSEMBLERS = {
    KeyValueMap: (frozenset({ChartKind.PIE, ChartKind.SIMPLE_HISTOGRAM}), _key_values),
    CategoryMatrix: (frozenset({ChartKind.HISTOGRAM, ChartKind.STACKED_HISTOGRAM}), _matrix),
    KeyedXYV: (frozenset({ChartKind.XYV, ChartKind.STACKED_XYV}), _xyv),
    PointSeries: (frozenset({ChartKind.BUBBLE}), _points),
    GenomicSeries: (frozenset({ChartKind.BEDGRAPH}), _genomic),
}


def assemble(kind: ChartKind, aggregate: Aggregate, options: PlotOptions) -> ChartData:
    """Turn an aggregate into chart series and axes.

    Args:
        kind: Target chart kind.
        aggregate: Aggregate produced by the grammar bound to `kind`.
        options: Plot configuration (axis labels).

    Returns:
        Chart-ready structure.

    Raises:
        ChartBuildError: If the aggregate shape does not fit the chart kind.
    """
    kinds, build = _ASSEMBLERS.get(type(aggregate), (frozenset(), None))
    if build is None or kind not in kinds:
        msg = f"Cannot draw a {type(aggregate).__name__} as a {kind.value} chart"
        raise ChartBuildError(msg)
    return build(kind, aggregate, options)  # type: ignore[operator]
