"""Fixed-column-count numeric tuple grammar feeding bubble and scatter plots."""

from __future__ import annotations

from collections.abc import Iterable

from tabchart.core.aggregates import NO_DATA, MinMax, NoData, PointSeries
from tabchart.infra.logging import get_logger

from .base import GrammarConfig, IngestStats
from .scalars import is_blank, parse_non_negative

logger = get_logger(__name__)

MIN_ARITY = 2


class TupleGrammar:
    """Reads lines holding at least `arity` numeric columns.

    Only the first `arity` columns are used. A line is dropped when it is too
    short or when one of those columns is not a non-negative number.
    """

    def __init__(self, config: GrammarConfig, arity: int = MIN_ARITY) -> None:
        """Initialize the tuple grammar.

        Args:
            config: Delimiter and scalar parser.
            arity: Number of leading numeric columns kept per line.

        Raises:
            ValueError: If arity is below 2.
        """
        if arity < MIN_ARITY:
            msg = f"Tuple arity must be at least {MIN_ARITY}, got {arity}"
            raise ValueError(msg)
        self.config = config
        self.arity = arity

    def _parse_line(self, line: str) -> tuple[float, ...] | None:
        """Return the first `arity` columns as non-negative numbers, or None."""
        tokens = self.config.split(line)
        if len(tokens) < self.arity:
            return None
        values = []
        for token in tokens[: self.arity]:
            value = parse_non_negative(token, self.config.parse)
            if value is None:
                return None
            values.append(value)
        return tuple(values)

    def ingest(self, source: Iterable[str]) -> PointSeries | NoData:
        """Collect the tuples and the x/y ranges, or NO_DATA if none were kept."""
        points: list[tuple[float, ...]] = []
        min_max_x = MinMax()
        min_max_y = MinMax()
        stats = IngestStats()
        for line in source:
            stats.lines += 1
            if is_blank(line):
                stats.skipped += 1
                continue
            point = self._parse_line(line)
            if point is None:
                stats.skipped += 1
                continue
            min_max_x.accept(point[0])
            min_max_y.accept(point[1])
            points.append(point)
            stats.kept += 1

        logger.debug("Tuple ingestion finished", arity=self.arity, **stats.as_fields())
        x_range = min_max_x.to_range()
        y_range = min_max_y.to_range()
        if x_range is None or y_range is None:
            return NO_DATA
        return PointSeries(arity=self.arity, points=tuple(points), x_range=x_range, y_range=y_range)
