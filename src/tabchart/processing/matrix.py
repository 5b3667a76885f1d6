"""Header-plus-rows matrix grammar feeding grouped and stacked histograms."""

from __future__ import annotations

from collections.abc import Iterable

from tabchart.core.aggregates import NO_DATA, CategoryMatrix, MatrixRow, NoData
from tabchart.infra.logging import get_logger

from .base import GrammarConfig, IngestStats
from .scalars import is_blank

logger = get_logger(__name__)


class MatrixGrammar:
    """Reads a header line followed by one row per series.

    Header column 0 labels the row names; columns 1..N name the categories.
    Values that are missing, unparsable or not positive become 0 so every row
    stays aligned with the header. Rows are kept in input order and repeated
    row names are allowed.
    """

    def __init__(self, config: GrammarConfig) -> None:
        """Initialize the matrix grammar.

        Args:
            config: Delimiter and scalar parser.
        """
        self.config = config

    def _value(self, tokens: list[str], column: int) -> float:
        """Value of one cell; missing, invalid and non-positive cells are 0."""
        if column >= len(tokens):
            return 0.0
        value = self.config.parse(tokens[column])
        if value is None or value <= 0:
            return 0.0
        return value

    def ingest(self, source: Iterable[str]) -> CategoryMatrix | NoData:
        """Build the matrix, or NO_DATA without a usable header or rows."""
        lines = iter(source)
        header_line = next(lines, None)
        if header_line is None:
            logger.debug("Matrix input is empty")
            return NO_DATA

        header = self.config.split(header_line)
        if len(header) <= 1:
            logger.debug("Matrix header has no value columns", header=header_line)
            return NO_DATA
        columns = tuple(header[1:])

        rows: list[MatrixRow] = []
        stats = IngestStats(lines=1)
        for line in lines:
            stats.lines += 1
            if is_blank(line):
                stats.skipped += 1
                continue
            tokens = self.config.split(line)
            values = tuple((label, self._value(tokens, index)) for index, label in enumerate(columns, start=1))
            rows.append(MatrixRow(name=tokens[0], values=values))
            stats.kept += 1

        logger.debug("Matrix ingestion finished", columns=len(columns), **stats.as_fields())
        if not rows:
            return NO_DATA
        return CategoryMatrix(columns=columns, rows=tuple(rows))
