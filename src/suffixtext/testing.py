"""Brute-force substring oracle for checking text indexes.

Test support only: O(n^3) time, never call it from indexing code.
"""
import logging
from typing import Callable

from .boundaries import char_offsets

logger = logging.getLogger(__name__)

MAX_REPORTED_MISSING = 10


def all_substrings(text: str | None) -> set[str]:
    """Return the set of every contiguous substring of text.

    Boundaries are counted in logical characters, so a surrogate pair is
    never split. Each substring is a slice of text, keeping its
    representation: every result satisfies `s in text`.
    """
    offsets = char_offsets(text)
    n = len(offsets) - 1
    if n == 0:
        return set()
    ret = set()
    for length in range(1, n + 1):
        for start in range(n - length + 1):
            ret.add(text[offsets[start]:offsets[start + length]])
    logger.debug("Enumerated %d distinct substrings over %d characters", len(ret), n)
    return ret


def missing_substrings(text: str | None, contains: Callable[[str], bool]) -> set[str]:
    """Substrings of text that the index behind `contains` fails to find."""
    return {s for s in all_substrings(text) if not contains(s)}


def assert_indexes_all_substrings(text: str | None, contains: Callable[[str], bool]) -> None:
    """Fail with AssertionError if any substring of text is not found."""
    missing = missing_substrings(text, contains)
    if missing:
        sample = sorted(missing, key=lambda s: (len(s), s))[:MAX_REPORTED_MISSING]
        raise AssertionError(
            f"{len(missing)} substring(s) of {text!r} not found in index, e.g. {sample!r}"
        )
