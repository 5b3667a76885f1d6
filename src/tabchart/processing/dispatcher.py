"""Selects the input grammar for a chart kind and runs one ingestion pass."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from tabchart.core.aggregates import NO_DATA, Aggregate, NoData
from tabchart.core.enums import ChartKind
from tabchart.core.errors import DictionaryMissingError
from tabchart.core.models import PlotOptions
from tabchart.genome import ContigDictionary, ContigNameConverter

from .base import Grammar, GrammarConfig
from .genomic import GenomicGrammar
from .key_value import KeyValueGrammar
from .matrix import MatrixGrammar
from .triples import TripleGrammar
from .tuples import TupleGrammar

GrammarFactory = Callable[[PlotOptions, GrammarConfig, ContigDictionary | None], Grammar]


def _key_value(options: PlotOptions, config: GrammarConfig, dictionary: ContigDictionary | None) -> Grammar:
    return KeyValueGrammar(config)


def _matrix(options: PlotOptions, config: GrammarConfig, dictionary: ContigDictionary | None) -> Grammar:
    return MatrixGrammar(config)


def _triples(options: PlotOptions, config: GrammarConfig, dictionary: ContigDictionary | None) -> Grammar:
    return TripleGrammar(config)


def _tuples(options: PlotOptions, config: GrammarConfig, dictionary: ContigDictionary | None) -> Grammar:
    return TupleGrammar(config, arity=options.bubble_columns)


def _genomic(options: PlotOptions, config: GrammarConfig, dictionary: ContigDictionary | None) -> Grammar:
    if dictionary is None:
        raise DictionaryMissingError("A contig dictionary is required for genomic input", path=options.reference)
    return GenomicGrammar(
        config,
        dictionary,
        ContigNameConverter.from_dictionary(dictionary),
        chrom_position=options.chrom_position,
    )


GRAMMARS: dict[ChartKind, GrammarFactory] = {
    ChartKind.PIE: _key_value,
    ChartKind.SIMPLE_HISTOGRAM: _key_value,
    ChartKind.HISTOGRAM: _matrix,
    ChartKind.STACKED_HISTOGRAM: _matrix,
    ChartKind.XYV: _triples,
    ChartKind.STACKED_XYV: _triples,
    ChartKind.BUBBLE: _tuples,
    ChartKind.BEDGRAPH: _genomic,
}


def create_grammar(options: PlotOptions, dictionary: ContigDictionary | None = None) -> Grammar:
    """Build the grammar bound to `options.kind`.

    Args:
        options: Plot configuration.
        dictionary: Resolved contig dictionary, required for genomic kinds.

    Returns:
        Grammar ready for a single ingestion pass.

    Raises:
        DictionaryMissingError: If a genomic kind is requested without a dictionary.
    """
    return GRAMMARS[options.kind](options, GrammarConfig.from_options(options), dictionary)


def ingest(grammar: Grammar, source: Iterable[str]) -> Aggregate | NoData:
    """Run one pass of `grammar` over `source`; empty aggregates become NO_DATA."""
    aggregate = grammar.ingest(source)
    if aggregate is NO_DATA or aggregate.is_empty:
        return NO_DATA
    return aggregate
