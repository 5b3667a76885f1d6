"""Chromosome name normalization against a contig dictionary."""

from __future__ import annotations

from tabchart.genome.dictionary import ContigDictionary

MITOCHONDRIAL_ALIASES = ("chrM", "chrMT", "M", "MT")


class ContigNameConverter:
    """Maps raw chromosome names onto the names used by one dictionary.

    Unmapped names yield None so that callers can skip the record.
    """

    def __init__(self, names: list[str]) -> None:
        self._names = set(names)
        self._mito = next((alias for alias in MITOCHONDRIAL_ALIASES if alias in self._names), None)

    @classmethod
    def from_dictionary(cls, dictionary: ContigDictionary) -> ContigNameConverter:
        return cls(dictionary.names)

    def convert(self, raw_name: str) -> str | None:
        """Return the dictionary's name for `raw_name`, or None."""
        name = raw_name.strip()
        if not name:
            return None
        if name in self._names:
            return name
        if name in MITOCHONDRIAL_ALIASES:
            return self._mito
        if name.startswith("chr"):
            candidate = name[3:]
        else:
            candidate = "chr" + name
        if candidate in self._names:
            return candidate
        return None
