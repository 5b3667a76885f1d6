"""Contig dictionaries and chromosome name normalization."""

from .contig_names import ContigNameConverter
from .dictionary import Contig, ContigDictionary, load_dictionary

__all__ = [
    "Contig",
    "ContigDictionary",
    "ContigNameConverter",
    "load_dictionary",
]
