"""Longest palindromic substring via interval dynamic programming.

The solver fills a boolean table ``is_pal[i][j]`` (substring ``i..j`` reads the
same in both directions) in order of increasing substring length.  The table
is a single flat numpy buffer of ``n * n`` cells, and each length is
evaluated as one vectorised pass over its diagonal.

Tie-breaking is deliberately asymmetric:

* Length-2 windows overwrite the running best on *every* match, so when the
  longest palindrome has length 2 the **last** such pair wins.
* Longer windows only replace the best on a strict improvement, so among
  palindromes of the maximal length >= 3 the **first** (leftmost) one wins.
* Without any repeated neighbour the first character ``(1, 1)`` is reported.

Time and space are both O(n^2).
"""

from __future__ import annotations

import numpy as np

from ._arena import code_points, flat_table
from .spans import PalindromeSpan, Span

__all__ = ["longest_palindromic_substring"]


def longest_palindromic_substring(text: str) -> PalindromeSpan:
    """Return the 1-based span of the longest palindrome in *text*.

    Parameters
    ----------
    text:
        Input string.  An empty string yields ``Span.EMPTY`` (``(0, 0)``).

    Raises
    ------
    TypeError
        If *text* is not a string.
    """

    if not isinstance(text, str):
        raise TypeError("text must be a string")

    n = len(text)
    if n == 0:
        return Span.EMPTY

    codes = code_points(text)
    is_pal = flat_table(n, n, np.bool_)
    singles = np.arange(n)
    is_pal[singles * n + singles] = True

    best_start, best_length = 0, 1

    if n >= 2:
        starts = np.arange(n - 1)
        pairs = codes[:-1] == codes[1:]
        is_pal[starts * n + starts + 1] = pairs
        hits = np.flatnonzero(pairs)
        if hits.size:
            best_start, best_length = int(hits[-1]), 2

    for k in range(3, n + 1):
        starts = np.arange(n - k + 1)
        ends = starts + k - 1
        cells = starts * n + ends
        # cells + n - 1 addresses the inner window (i + 1, j - 1)
        found = is_pal[cells + n - 1] & (codes[starts] == codes[ends])
        is_pal[cells] = found
        if k > best_length:
            hits = np.flatnonzero(found)
            if hits.size:
                best_start, best_length = int(hits[0]), k

    return Span.from_zero_based(best_start, best_length)
