"""Shared configuration and contract for the input grammars."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from tabchart.core.aggregates import Aggregate, NoData
from tabchart.core.models import PlotOptions

from .scalars import ScalarParser, natural_sorted, parse_scalar


@dataclass(frozen=True)
class GrammarConfig:
    """Explicit parsing configuration handed to every grammar."""

    delimiter: str = "\t"
    sort_unique: bool = False
    parse: ScalarParser = parse_scalar
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_pattern", re.compile(re.escape(self.delimiter)))

    @classmethod
    def from_options(cls, options: PlotOptions) -> GrammarConfig:
        return cls(delimiter=options.delimiter, sort_unique=options.sort_unique)

    def split(self, line: str, maxsplit: int = 0) -> list[str]:
        """Split a line on the delimiter; maxsplit 0 means no limit."""
        return self._pattern.split(line, maxsplit=maxsplit)

    def ordered_keys(self, keys: Iterable[str]) -> list[str]:
        """Counted keys read better sorted; free-form keys keep input order."""
        if self.sort_unique:
            return natural_sorted(keys)
        return list(keys)


class Grammar(Protocol):
    """One input grammar: a single pass over lines into one aggregate."""

    def ingest(self, source: Iterable[str]) -> Aggregate | NoData:
        """Consume every line of `source` and build the aggregate."""
        ...


@dataclass
class IngestStats:
    """Line accounting for one ingestion pass."""

    lines: int = 0
    kept: int = 0
    skipped: int = 0
    duplicates: int = 0

    def as_fields(self) -> dict[str, int]:
        return {
            "lines": self.lines,
            "kept": self.kept,
            "skipped": self.skipped,
            "duplicates": self.duplicates,
        }
