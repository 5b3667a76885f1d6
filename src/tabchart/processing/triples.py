"""X/Y/value grammar feeding grouped and stacked XYV histograms."""

from __future__ import annotations

from collections.abc import Iterable

from tabchart.core.aggregates import NO_DATA, KeyedXYV, NoData
from tabchart.infra.logging import get_logger

from .base import GrammarConfig, IngestStats
from .scalars import is_blank, parse_sort_unique

logger = get_logger(__name__)


class TripleGrammar:
    """Reads `X<delim>Y<delim>VALUE` lines, or counted `X<delim>Y` pairs.

    The first value recorded for an (X, Y) pair wins; later duplicates are
    dropped with a warning. Missing pairs are not stored.
    """

    def __init__(self, config: GrammarConfig) -> None:
        """Initialize the X/Y/value grammar.

        Args:
            config: Delimiter, sort-unique mode and scalar parser.
        """
        self.config = config

    def _parse_line(self, line: str) -> tuple[str, str, float | None] | None:
        """Return (x key, y key, value); a None value marks an unusable record."""
        if self.config.sort_unique:
            record = parse_sort_unique(line, self.config.parse)
            if record is None:
                return None
            count, remainder = record
            tokens = self.config.split(remainder)
            if len(tokens) < 2:
                return None
            return tokens[0], tokens[1], count

        tokens = self.config.split(line)
        if len(tokens) < 3:
            return None
        return tokens[0], tokens[1], self.config.parse(tokens[2])

    def ingest(self, source: Iterable[str]) -> KeyedXYV | NoData:
        """Build the X -> Y -> value table, or NO_DATA when nothing was kept."""
        table: dict[str, dict[str, float]] = {}
        y_keys: dict[str, None] = {}
        stats = IngestStats()
        for line in source:
            stats.lines += 1
            record = self._parse_line(line)
            if record is None:
                stats.skipped += 1
                continue
            x_key, y_key, value = record
            if value is None or value < 0 or is_blank(x_key) or is_blank(y_key):
                stats.skipped += 1
                continue

            row = table.setdefault(x_key, {})
            y_keys.setdefault(y_key, None)
            if y_key in row:
                logger.warning("Duplicate value", x_key=x_key, y_key=y_key, line=stats.lines)
                stats.duplicates += 1
                continue
            row[y_key] = value
            stats.kept += 1

        logger.debug("XYV ingestion finished", x_keys=len(table), y_keys=len(y_keys), **stats.as_fields())
        if not table:
            return NO_DATA

        ordered = {
            x_key: {y_key: table[x_key][y_key] for y_key in self.config.ordered_keys(table[x_key])}
            for x_key in self.config.ordered_keys(table)
        }
        return KeyedXYV(table=ordered, y_keys=tuple(y_keys))
