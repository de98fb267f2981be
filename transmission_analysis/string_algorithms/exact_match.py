"""Linear-time exact pattern search built on the prefix function."""

from __future__ import annotations

import logging

from .prefix_table import build_prefix_table
from .spans import MatchResult

logger = logging.getLogger(__name__)

__all__ = ["find_first_occurrence"]


def find_first_occurrence(text: str, pattern: str) -> MatchResult:
    """Locate the first occurrence of *pattern* inside *text*.

    The search never moves backwards over *text*: on a mismatch the pattern
    index falls back through the prefix table while the text index stays put,
    giving O(n + m) time overall.  Only the first occurrence is reported.

    An empty pattern never matches and yields ``MatchResult.NOT_FOUND``.

    Raises
    ------
    TypeError
        If *text* or *pattern* is not a string.
    """

    if not isinstance(text, str):
        raise TypeError("text must be a string")
    if not isinstance(pattern, str):
        raise TypeError("pattern must be a string")

    n, m = len(text), len(pattern)
    if m == 0:
        return MatchResult.NOT_FOUND

    table = build_prefix_table(pattern)
    i = j = 0
    while i < n:
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == m:
                position = i - j + 1
                logger.debug("Pattern of length %d found at %d", m, position)
                return MatchResult.found_at(position)
        elif j != 0:
            j = table[j - 1]
        else:
            i += 1
    return MatchResult.NOT_FOUND
