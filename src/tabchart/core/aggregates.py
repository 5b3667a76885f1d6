"""Canonical aggregate shapes produced by the input grammars.

Every aggregate is built during one streaming pass and then frozen. Grammars
accumulate into plain dicts and lists and hand out the immutable shapes
defined here.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class NoData(Enum):
    """Distinguished result for a stream that yielded nothing usable."""

    NO_DATA = "no_data"


NO_DATA = NoData.NO_DATA


@dataclass(frozen=True)
class AxisRange:
    """Closed numeric interval observed on one axis."""

    lower: float
    upper: float

    @property
    def span(self) -> float:
        return self.upper - self.lower

    @property
    def tick(self) -> float:
        """Suggested tick spacing: a tenth of the span."""
        return self.span / 10.0

    @property
    def is_degenerate(self) -> bool:
        return self.span == 0


class MinMax:
    """Running minimum/maximum of the values seen on one axis."""

    def __init__(self) -> None:
        self.lower: float | None = None
        self.upper: float | None = None

    def accept(self, value: float) -> None:
        if self.lower is None or self.upper is None:
            self.lower = self.upper = value
        else:
            self.lower = min(self.lower, value)
            self.upper = max(self.upper, value)

    @property
    def is_empty(self) -> bool:
        return self.lower is None

    def to_range(self) -> AxisRange | None:
        if self.lower is None or self.upper is None:
            return None
        return AxisRange(self.lower, self.upper)


@dataclass(frozen=True)
class KeyValueMap:
    """Ordered mapping from a category key to a non-negative value."""

    entries: tuple[tuple[str, float], ...] = ()

    @classmethod
    def from_dict(cls, values: Mapping[str, float]) -> KeyValueMap:
        return cls(tuple(values.items()))

    def as_dict(self) -> dict[str, float]:
        return dict(self.entries)

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple[str, float]]:
        return iter(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries


@dataclass(frozen=True)
class MatrixRow:
    """One row of a header-plus-rows matrix."""

    name: str
    values: tuple[tuple[str, float], ...]


@dataclass(frozen=True)
class CategoryMatrix:
    """Rows of values aligned on a shared header."""

    columns: tuple[str, ...]
    rows: tuple[MatrixRow, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.rows


@dataclass(frozen=True)
class KeyedXYV:
    """Two-level mapping X -> Y -> value plus every Y key in first-seen order.

    Missing (X, Y) combinations are not stored; `value` reports them as 0.
    """

    table: Mapping[str, Mapping[str, float]] = field(default_factory=dict)
    y_keys: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        frozen = {x: MappingProxyType(dict(row)) for x, row in self.table.items()}
        object.__setattr__(self, "table", MappingProxyType(frozen))

    @property
    def x_keys(self) -> tuple[str, ...]:
        return tuple(self.table)

    def value(self, x_key: str, y_key: str) -> float:
        row = self.table.get(x_key)
        if row is None:
            return 0.0
        return row.get(y_key, 0.0)

    @property
    def is_empty(self) -> bool:
        return not self.table


@dataclass(frozen=True)
class PointSeries:
    """Fixed-arity numeric tuples with the observed range of the first two axes."""

    arity: int
    points: tuple[tuple[float, ...], ...]
    x_range: AxisRange
    y_range: AxisRange

    @property
    def is_empty(self) -> bool:
        return not self.points


@dataclass(frozen=True)
class ContigPoints:
    """Points falling on one contig, in input order."""

    name: str
    points: tuple[tuple[int, float], ...] = ()


@dataclass(frozen=True)
class GenomicSeries:
    """Per-contig (linear genome offset, value) series in dictionary order."""

    contigs: tuple[ContigPoints, ...]
    value_range: AxisRange
    reference_length: int

    @property
    def point_count(self) -> int:
        return sum(len(contig.points) for contig in self.contigs)

    @property
    def is_empty(self) -> bool:
        return self.point_count == 0


Aggregate = KeyValueMap | CategoryMatrix | KeyedXYV | PointSeries | GenomicSeries
