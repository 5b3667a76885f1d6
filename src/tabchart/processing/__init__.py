"""Input grammars, grammar dispatch and chart assembly."""

from .assembler import assemble
from .base import Grammar, GrammarConfig
from .dispatcher import create_grammar, ingest
from .genomic import GenomicGrammar
from .key_value import KeyValueGrammar
from .matrix import MatrixGrammar
from .triples import TripleGrammar
from .tuples import TupleGrammar

__all__ = [
    "GenomicGrammar",
    "Grammar",
    "GrammarConfig",
    "KeyValueGrammar",
    "MatrixGrammar",
    "TripleGrammar",
    "TupleGrammar",
    "assemble",
    "create_grammar",
    "ingest",
]
