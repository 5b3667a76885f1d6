"""Ordered contig dictionaries loaded from reference resources.

Supported resources:
- SAM sequence dictionaries (`.dict`, `@SQ SN:<name> LN:<length>` lines)
- FASTA indexes (`.fai`, `<name><tab><length>...`)
- FASTA files, through a sibling `.fai` or `.dict`
- VCF headers (`##contig=<ID=<name>,length=<length>>`), plain or gzipped
"""

from __future__ import annotations

import gzip
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from tabchart.core.errors import DictionaryMissingError
from tabchart.infra.logging import get_logger

logger = get_logger(__name__)

FASTA_SUFFIXES = (".fa", ".fasta", ".fna", ".fa.gz", ".fasta.gz", ".fna.gz")
VCF_SUFFIXES = (".vcf", ".vcf.gz", ".vcf.bgz")

VCF_CONTIG = re.compile(r"^##contig=<(?P<attrs>.*)>\s*$")
VCF_ATTR = re.compile(r'(?P<key>[A-Za-z_]+)=(?P<value>"[^"]*"|[^,]*)')


@dataclass(frozen=True)
class Contig:
    """A named reference sequence and its place on the linear genome axis."""

    name: str
    length: int
    index: int
    offset: int  # cumulative length of all preceding contigs


class ContigDictionary:
    """Read-only, ordered collection of contigs."""

    def __init__(self, contigs: Iterable[tuple[str, int]]) -> None:
        """Build a dictionary from (name, length) pairs in reference order.

        Args:
            contigs: Contig names and lengths.

        Raises:
            ValueError: If a name is repeated or a length is negative.
        """
        records: list[Contig] = []
        by_name: dict[str, Contig] = {}
        offset = 0
        for index, (name, length) in enumerate(contigs):
            if name in by_name:
                msg = f"Duplicate contig in dictionary: {name}"
                raise ValueError(msg)
            if length < 0:
                msg = f"Negative length for contig {name}: {length}"
                raise ValueError(msg)
            contig = Contig(name=name, length=length, index=index, offset=offset)
            records.append(contig)
            by_name[name] = contig
            offset += length
        self._contigs = tuple(records)
        self._by_name = by_name
        self.reference_length = offset

    def get(self, name: str) -> Contig | None:
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Contig]:
        return iter(self._contigs)

    def __len__(self) -> int:
        return len(self._contigs)

    @property
    def names(self) -> list[str]:
        return [contig.name for contig in self._contigs]

    @property
    def is_empty(self) -> bool:
        return not self._contigs

    def __repr__(self) -> str:
        return f"ContigDictionary({len(self)} contigs, {self.reference_length} bp)"


def _open_text(path: Path) -> TextIO:
    if path.suffix in (".gz", ".bgz"):
        return gzip.open(path, "rt", encoding="utf-8")
    return path.open(encoding="utf-8")


def _has_suffix(path: Path, suffixes: tuple[str, ...]) -> bool:
    name = path.name.lower()
    return any(name.endswith(suffix) for suffix in suffixes)


def read_sam_dict(lines: Iterable[str]) -> list[tuple[str, int]]:
    """Extract contigs from `@SQ` header lines."""
    contigs = []
    for line in lines:
        if not line.startswith("@SQ"):
            continue
        fields = dict(token.split(":", 1) for token in line.rstrip("\r\n").split("\t")[1:] if ":" in token)
        if "SN" in fields and "LN" in fields:
            contigs.append((fields["SN"], int(fields["LN"])))
    return contigs


def read_fai(lines: Iterable[str]) -> list[tuple[str, int]]:
    """Extract contigs from a FASTA index."""
    contigs = []
    for line in lines:
        tokens = line.rstrip("\r\n").split("\t")
        if len(tokens) < 2 or not tokens[0]:
            continue
        contigs.append((tokens[0], int(tokens[1])))
    return contigs


def read_vcf_header(lines: Iterable[str]) -> list[tuple[str, int]]:
    """Extract contigs from `##contig` lines of a VCF header."""
    contigs = []
    for line in lines:
        if not line.startswith("##"):
            break
        match = VCF_CONTIG.match(line)
        if not match:
            continue
        attrs = {m.group("key"): m.group("value").strip('"') for m in VCF_ATTR.finditer(match.group("attrs"))}
        if "ID" in attrs and "length" in attrs:
            contigs.append((attrs["ID"], int(attrs["length"])))
    return contigs


def _fasta_companion(path: Path) -> Path | None:
    fai = path.with_name(path.name + ".fai")
    if fai.exists():
        return fai
    stem = path.name
    for suffix in FASTA_SUFFIXES:
        if stem.lower().endswith(suffix):
            stem = stem[: -len(suffix)]
            break
    sam_dict = path.with_name(stem + ".dict")
    if sam_dict.exists():
        return sam_dict
    return None


def _extract(path: Path) -> list[tuple[str, int]]:
    if _has_suffix(path, FASTA_SUFFIXES):
        companion = _fasta_companion(path)
        if companion is None:
            msg = f"No .fai or .dict found next to {path}"
            raise DictionaryMissingError(msg, path=path)
        return _extract(companion)

    with _open_text(path) as stream:
        if path.name.endswith(".dict"):
            return read_sam_dict(stream)
        if path.name.endswith(".fai"):
            return read_fai(stream)
        if _has_suffix(path, VCF_SUFFIXES):
            return read_vcf_header(stream)

    msg = f"Cannot extract a dictionary from {path}"
    raise DictionaryMissingError(msg, path=path)


def load_dictionary(path: Path | str | None, min_contig_size: int = -1) -> ContigDictionary:
    """Load an ordered contig dictionary from a reference resource.

    Args:
        path: Reference resource (.dict, .fai, indexed FASTA or VCF).
        min_contig_size: Drop contigs shorter than this; negative keeps all.

    Returns:
        Loaded dictionary, never empty.

    Raises:
        DictionaryMissingError: If the resource is undefined, unreadable or
            yields no contigs.
    """
    if path is None:
        raise DictionaryMissingError("Undefined reference file")

    path = Path(path)
    if not path.exists():
        msg = f"Reference file not found: {path}"
        raise DictionaryMissingError(msg, path=path)

    try:
        contigs = _extract(path)
    except (OSError, ValueError) as e:
        msg = f"Cannot read dictionary from {path}: {e}"
        raise DictionaryMissingError(msg, path=path) from e

    if min_contig_size >= 0:
        contigs = [(name, length) for name, length in contigs if length >= min_contig_size]

    if not contigs:
        msg = f"Empty dictionary extracted from {path}"
        raise DictionaryMissingError(msg, path=path)

    try:
        dictionary = ContigDictionary(contigs)
    except ValueError as e:
        raise DictionaryMissingError(str(e), path=path) from e

    logger.info(
        "Loaded contig dictionary",
        path=str(path),
        contigs=len(dictionary),
        reference_length=dictionary.reference_length,
    )
    return dictionary
