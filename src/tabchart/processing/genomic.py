"""Genomic interval grammar feeding the genome-wide scatter plot."""

from __future__ import annotations

from collections.abc import Iterable

from tabchart.core.aggregates import NO_DATA, ContigPoints, GenomicSeries, MinMax, NoData
from tabchart.genome import ContigDictionary, ContigNameConverter
from tabchart.infra.logging import get_logger

from .base import GrammarConfig, IngestStats
from .scalars import is_bed_header, is_blank, parse_int, parse_non_negative

logger = get_logger(__name__)


class GenomicGrammar:
    """Reads BED-like `CHROM START END VALUE` or `CHROM POS VALUE` lines.

    Each record is placed on a single axis spanning every contig: the
    interval midpoint plus the cumulative length of the contigs preceding its
    own in dictionary order. Records on unknown contigs, with a missing or
    negative value, or outside `0 <= start <= end <= contig length` are
    dropped.
    """

    def __init__(
        self,
        config: GrammarConfig,
        dictionary: ContigDictionary,
        converter: ContigNameConverter | None = None,
        chrom_position: bool = False,
    ) -> None:
        """Initialize the grammar.

        Args:
            config: Parsing configuration.
            dictionary: Resolved, read-only contig dictionary.
            converter: Contig name normalizer; built from `dictionary` when absent.
            chrom_position: Input is CHROM/POS/VALUE instead of BED.
        """
        self.config = config
        self.dictionary = dictionary
        self.converter = converter or ContigNameConverter.from_dictionary(dictionary)
        self.chrom_position = chrom_position

    def _parse_line(self, line: str) -> tuple[int, int, float] | None:
        """Return (contig index, linear genome offset, value)."""
        tokens = self.config.split(line)
        if len(tokens) < (3 if self.chrom_position else 4):
            return None

        name = self.converter.convert(tokens[0])
        if name is None:
            return None
        contig = self.dictionary.get(name)
        if contig is None:
            return None

        if self.chrom_position:
            start = end = parse_int(tokens[1])
            value = parse_non_negative(tokens[2], self.config.parse)
        else:
            start = parse_int(tokens[1])
            end = parse_int(tokens[2])
            value = parse_non_negative(tokens[3], self.config.parse)

        if start is None or end is None or value is None:
            return None
        if start > end or start < 0 or end > contig.length:
            return None

        midpoint = (start + end) // 2
        return contig.index, contig.offset + midpoint, value

    def ingest(self, source: Iterable[str]) -> GenomicSeries | NoData:
        """Build one point series per contig, or NO_DATA if nothing was kept."""
        per_contig: list[list[tuple[int, float]]] = [[] for _ in self.dictionary]
        min_max = MinMax()
        stats = IngestStats()
        for line in source:
            stats.lines += 1
            if is_blank(line) or is_bed_header(line):
                stats.skipped += 1
                continue
            record = self._parse_line(line)
            if record is None:
                stats.skipped += 1
                continue
            index, position, value = record
            per_contig[index].append((position, value))
            min_max.accept(value)
            stats.kept += 1

        logger.debug("Genomic ingestion finished", contigs=len(self.dictionary), **stats.as_fields())
        value_range = min_max.to_range()
        if value_range is None or self.dictionary.is_empty:
            return NO_DATA

        contigs = tuple(
            ContigPoints(name=contig.name, points=tuple(points))
            for contig, points in zip(self.dictionary, per_contig, strict=True)
        )
        return GenomicSeries(
            contigs=contigs,
            value_range=value_range,
            reference_length=self.dictionary.reference_length,
        )
