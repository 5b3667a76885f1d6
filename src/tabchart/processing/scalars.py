"""Token-level parsing shared by the input grammars."""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable

from natsort import natsort_keygen

ABSENT_TOKENS = frozenset({"", ".", "NA"})
BED_HEADER_PREFIXES = ("#", "track", "browser")

# optional leading blanks, a digit run, exactly one blank, then the rest verbatim
SORT_UNIQUE_LINE = re.compile(r"^\s*(?P<count>[0-9]+)\s(?P<rest>.+)$", re.DOTALL)
# ASCII digits only; float() and int() would also take "1_000" and non-Latin digits
DECIMAL = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
INTEGER = re.compile(r"^[+-]?[0-9]+$")

ScalarParser = Callable[[str], float | None]

natural_key = natsort_keygen()


def parse_scalar(token: str | None) -> float | None:
    """Parse a real number using the invariant (C locale) format.

    Args:
        token: Raw token.

    Returns:
        The finite value, or None for blank, `.`, `NA` and malformed text.
    """
    if token is None:
        return None
    token = token.strip()
    if token in ABSENT_TOKENS or not DECIMAL.match(token):
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    return value


def parse_non_negative(token: str | None, parse: ScalarParser = parse_scalar) -> float | None:
    """Parse a scalar and treat negative values as absent."""
    value = parse(token) if token is not None else None
    if value is None or value < 0:
        return None
    return value


def parse_sort_unique(line: str, parse: ScalarParser = parse_scalar) -> tuple[float, str] | None:
    """Split one line of `sort | uniq -c` output.

    Args:
        line: Input line, e.g. `"     12 foo bar"`.
        parse: Scalar parser applied to the count.

    Returns:
        (count, remainder), or None when there is no count or no remainder.
    """
    match = SORT_UNIQUE_LINE.match(line)
    if match is None:
        return None
    count = parse_non_negative(match.group("count"), parse)
    if count is None:
        return None
    return count, match.group("rest")


def parse_int(token: str) -> int | None:
    """Parse a plain ASCII integer, optionally signed."""
    token = token.strip()
    if not INTEGER.match(token):
        return None
    return int(token)


def is_blank(line: str) -> bool:
    return not line.strip()


def is_bed_header(line: str) -> bool:
    """Recognize BED comment, track and browser lines."""
    return line.startswith(BED_HEADER_PREFIXES)


def natural_sorted(keys: Iterable[str]) -> list[str]:
    """Sort strings comparing embedded digit runs by numeric value."""
    return sorted(keys, key=natural_key)
