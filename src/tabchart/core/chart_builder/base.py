"""Base template abstract class for chart rendering."""

from abc import ABC, abstractmethod
from typing import Any

import altair as alt
import polars as pl

from tabchart.core.enums import AxisKind, MarkType
from tabchart.core.models import AxisSpec, ChartData

# Width given to a numeric axis whose range collapsed to one value
DEGENERATE_SPAN = 1.0
SERIES_FIELD = "series"
# distinct per series even when two series share a display name
SERIES_KEY_FIELD = "series_key"


class BaseTemplate(ABC):
    """Abstract base class for all chart templates."""

    marks: tuple[MarkType, ...] = ()

    @abstractmethod
    def build(self, data: ChartData, width: int = 800, height: int = 600) -> alt.Chart:
        """Build an Altair chart from assembled chart data.

        Args:
            data: Assembled series and axes
            width: Chart width in pixels
            height: Chart height in pixels

        Returns:
            Altair chart object
        """

    def to_frame(self, data: ChartData) -> pl.DataFrame:
        """Flatten every series into one long-format frame.

        Columns: series (display name), series_key, x, y and, for bubbles, size.
        """
        columns: dict[str, list[Any]] = {SERIES_FIELD: [], SERIES_KEY_FIELD: [], "x": [], "y": [], "size": []}
        for series, key in zip(data.series, self.series_keys(data), strict=True):
            for point in series.points:
                columns[SERIES_FIELD].append(series.name)
                columns[SERIES_KEY_FIELD].append(key)
                columns["x"].append(point.x)
                columns["y"].append(point.y)
                columns["size"].append(point.size)
        frame = pl.DataFrame(columns, schema=self._schema(data))
        if data.mark != MarkType.BUBBLE:
            frame = frame.drop("size")
        return frame

    def _schema(self, data: ChartData) -> dict[str, Any]:
        x_type = pl.Float64 if data.x_axis is not None and data.x_axis.kind == AxisKind.NUMERIC else pl.Utf8
        return {SERIES_FIELD: pl.Utf8, SERIES_KEY_FIELD: pl.Utf8, "x": x_type, "y": pl.Float64, "size": pl.Float64}

    def prepare_data_for_altair(self, data: pl.DataFrame) -> dict[str, Any]:
        """Convert Polars DataFrame to Altair-compatible format.

        Args:
            data: Polars DataFrame

        Returns:
            Dictionary in records format for Altair
        """
        return {"values": data.to_dicts()}

    @staticmethod
    def categories(data: ChartData) -> list[str]:
        """Distinct x categories in first-seen order."""
        seen: dict[str, None] = {}
        for series in data.series:
            for point in series.points:
                seen.setdefault(str(point.x), None)
        return list(seen)

    @staticmethod
    def series_keys(data: ChartData) -> list[str]:
        """One distinct key per series, in order.

        A repeated name gets a ` #n` suffix: two rows called `r` become `r`
        and `r #2`.
        """
        keys: list[str] = []
        used: set[str] = set()
        for series in data.series:
            key, occurrence = series.name, 1
            while key in used:
                occurrence += 1
                key = f"{series.name} #{occurrence}"
            used.add(key)
            keys.append(key)
        return keys

    @staticmethod
    def numeric_scale(axis: AxisSpec | None, zero: bool = False) -> alt.Scale:
        """Scale for a numeric axis, widening a degenerate range."""
        if axis is None or axis.lower is None or axis.upper is None:
            return alt.Scale(zero=zero)
        lower, upper = axis.lower, axis.upper
        if axis.is_degenerate:
            lower -= DEGENERATE_SPAN / 2
            upper += DEGENERATE_SPAN / 2
        return alt.Scale(domain=[lower, upper], zero=zero, nice=False)

    @staticmethod
    def numeric_axis(axis: AxisSpec | None) -> alt.Axis:
        tick_count = 10
        if axis is not None and axis.tick and axis.lower is not None and axis.upper is not None:
            tick_count = max(1, round((axis.upper - axis.lower) / axis.tick))
        return alt.Axis(tickCount=tick_count)

    @staticmethod
    def axis_title(axis: AxisSpec | None, default: str | None = None) -> str | None:
        if axis is not None and axis.label:
            return axis.label
        return default
