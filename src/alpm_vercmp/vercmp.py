"""
Version Comparison

Orders pacman package versions using the epoch, version and release fields
produced by the EVR parser, following libalpm's alpm_pkg_vercmp semantics.
"""

from enum import IntEnum
from functools import cmp_to_key
from itertools import zip_longest
from typing import Iterable, Optional

from .evr import parse_evr

DIGITS = "0123456789"

# Segment kinds, valued by how they rank against each other at one position.
# A trailing letter run is older than no suffix, anything else is newer.
_ALPHA = 0
_END = 1
_SEPARATOR = 2
_DIGIT = 3


class ComparisonResult(IntEnum):
    """Three-way ordering of two versions, valued like alpm_pkg_vercmp."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_int(cls, value: int) -> "ComparisonResult":
        """Map an integer to a result by its sign."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    def invert(self) -> "ComparisonResult":
        """Return the result of the comparison with its operands swapped."""
        return ComparisonResult(-self.value)


def _char_kind(char: str) -> int:
    if char in DIGITS:
        return _DIGIT
    if char.isalpha():
        return _ALPHA
    return _SEPARATOR


def split_segments(version: str) -> list[str]:
    """
    Split a version string into comparable segments.

    Segments are maximal runs of digits, letters or separators. Separators
    are kept so that they take part in the comparison.

    Examples:
        "1.2"      -> ["1", ".", "2"]
        "1.0a"     -> ["1", ".", "0", "a"]
        "2.0rc1_3" -> ["2", ".", "0", "rc", "1", "_", "3"]
    """
    segments = []
    current = ""
    current_kind = None

    for char in version:
        kind = _char_kind(char)
        if kind != current_kind and current:
            segments.append(current)
            current = ""
        current += char
        current_kind = kind

    if current:
        segments.append(current)

    return segments


def _compare_numeric(s1: str, s2: str) -> int:
    # Length first so arbitrarily long runs never go through int()
    s1 = s1.lstrip("0")
    s2 = s2.lstrip("0")
    if len(s1) != len(s2):
        return -1 if len(s1) < len(s2) else 1
    if s1 != s2:
        return -1 if s1 < s2 else 1
    return 0


def compare_segments(v1: str, v2: str) -> ComparisonResult:
    """
    Compare two version fields segment by segment.

    Digit runs compare numerically, letter and separator runs compare
    lexically. When the segment kinds differ at the same position, or one
    field runs out, the kinds rank as letters < end of field < separators
    < digits. So "1.0a" < "1.0" < "1.0.1".

    Returns:
        ComparisonResult of v1 against v2
    """
    if v1 == v2:
        return ComparisonResult.EQUAL

    for s1, s2 in zip_longest(split_segments(v1), split_segments(v2)):
        kind1 = _END if s1 is None else _char_kind(s1[0])
        kind2 = _END if s2 is None else _char_kind(s2[0])

        if kind1 != kind2:
            return ComparisonResult.from_int(kind1 - kind2)

        if kind1 == _DIGIT:
            result = _compare_numeric(s1, s2)
        elif s1 < s2:
            result = -1
        elif s1 > s2:
            result = 1
        else:
            result = 0

        if result != 0:
            return ComparisonResult.from_int(result)

    return ComparisonResult.EQUAL


def _compare_epochs(e1: str, e2: str) -> ComparisonResult:
    if e1.isascii() and e1.isdigit() and e2.isascii() and e2.isdigit():
        return ComparisonResult.from_int(_compare_numeric(e1, e2))
    return compare_segments(e1, e2)


def compare_versions(a: str, b: str) -> ComparisonResult:
    """
    Compare two package version strings.

    Epochs are compared first (an absent epoch counts as 0), then versions.
    Releases only break a tie when both versions carry one, so "1.0" and
    "1.0-2" are equal.

    Args:
        a: First version string
        b: Second version string

    Returns:
        LESS if a is older than b, EQUAL if they are the same version,
        GREATER if a is newer
    """
    if a == b:
        return ComparisonResult.EQUAL

    evr1 = parse_evr(a)
    evr2 = parse_evr(b)

    result = _compare_epochs(evr1.epoch_or_default, evr2.epoch_or_default)
    if result != ComparisonResult.EQUAL:
        return result

    result = compare_segments(evr1.version, evr2.version)
    if result != ComparisonResult.EQUAL:
        return result

    if evr1.release is None or evr2.release is None:
        return ComparisonResult.EQUAL
    return compare_segments(evr1.release, evr2.release)


def vercmp(a: str, b: str) -> int:
    """
    Compare two version strings.

    Returns:
        -1 if a < b
         0 if a == b
         1 if a > b
    """
    return int(compare_versions(a, b))


def is_newer(current: str, candidate: str) -> bool:
    """Return True if candidate is newer than current."""
    return compare_versions(candidate, current) == ComparisonResult.GREATER


def sort_versions(versions: Iterable[str], reverse: bool = False) -> list[str]:
    """Return versions sorted from oldest to newest (newest first if reverse)."""
    return sorted(versions, key=cmp_to_key(vercmp), reverse=reverse)


def newest(versions: Iterable[str]) -> Optional[str]:
    """Return the newest of the given versions, or None if there are none."""
    result = None
    for version in versions:
        if result is None or is_newer(result, version):
            result = version
    return result
