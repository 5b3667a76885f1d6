"""Key/value-per-line grammar feeding pie charts and simple histograms."""

from __future__ import annotations

from collections.abc import Iterable

from tabchart.core.aggregates import KeyValueMap
from tabchart.infra.logging import get_logger

from .base import GrammarConfig, IngestStats
from .scalars import is_blank, parse_non_negative, parse_sort_unique

logger = get_logger(__name__)


class KeyValueGrammar:
    """Reads `KEY<delim>VALUE` lines, or `sort | uniq -c` output.

    In delimited mode the first occurrence of a key wins and later ones are
    skipped. In sort-unique mode a repeated key overwrites the earlier count.
    Blank lines and `#` comments are ignored in both modes.
    """

    def __init__(self, config: GrammarConfig) -> None:
        """Initialize the key/value grammar.

        Args:
            config: Delimiter, sort-unique mode and scalar parser.
        """
        self.config = config

    def _parse_line(self, line: str, seen: dict[str, float]) -> tuple[str, float] | None:
        """Return (key, value), or None when the line is skipped.

        Args:
            line: Input line without terminator.
            seen: Keys kept so far; delimited mode keeps the first value.
        """
        if self.config.sort_unique:
            record = parse_sort_unique(line, self.config.parse)
            if record is None:
                return None
            count, key = record
            return key, count

        tokens = self.config.split(line, maxsplit=1)
        if len(tokens) < 2 or tokens[0] in seen:
            return None
        value = parse_non_negative(tokens[1], self.config.parse)
        if value is None:
            return None
        return tokens[0], value

    def ingest(self, source: Iterable[str]) -> KeyValueMap:
        """Build the key/value map; an empty input gives an empty map."""
        values: dict[str, float] = {}
        stats = IngestStats()
        for line in source:
            stats.lines += 1
            if is_blank(line) or line.startswith("#"):
                stats.skipped += 1
                continue
            record = self._parse_line(line, values)
            if record is None or is_blank(record[0]):
                stats.skipped += 1
                continue
            key, value = record
            values[key] = value
            stats.kept += 1

        logger.debug("Key/value ingestion finished", keys=len(values), **stats.as_fields())
        ordered = {key: values[key] for key in self.config.ordered_keys(values)}
        return KeyValueMap.from_dict(ordered)
