"""Longest common substring of two texts via two-sequence dynamic programming."""

from __future__ import annotations

import numpy as np

from ._arena import code_points, flat_table, run_length_dtype
from .spans import CommonSubstringSpan, Span

__all__ = ["longest_common_substring"]


def longest_common_substring(first: str, second: str) -> CommonSubstringSpan:
    """Return the span, within *first*, of the longest substring shared with *second*.

    ``dp[i][j]`` is the length of the common run ending at ``first[i - 1]`` and
    ``second[j - 1]``; a mismatch resets it to zero.  The table lives in one
    flat ``(m + 1) * (n + 1)`` buffer and each row is computed in a single
    vectorised step.  The maximum is tracked in row-major order and replaced
    only on a strict improvement, so among equally long candidates the one
    ending earliest in *first* wins.  Swapping the arguments may therefore
    yield a different span of the same length.

    ``Span.EMPTY`` is returned when the texts share no character at all.
    Time and space are O(m * n).

    Raises
    ------
    TypeError
        If either argument is not a string.
    """

    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("texts must be strings")

    m, n = len(first), len(second)
    if m == 0 or n == 0:
        return Span.EMPTY

    left = code_points(first)
    right = code_points(second)
    width = n + 1
    # runs never exceed min(m, n), so the narrowest fitting dtype is enough
    dp = flat_table(m + 1, width, run_length_dtype(min(m, n)))

    best_length, best_end = 0, 0
    for i in range(1, m + 1):
        row = i * width
        above = row - width
        dp[row + 1 : row + width] = np.where(
            right == left[i - 1], dp[above : above + n] + 1, 0
        )
        longest = int(dp[row + 1 : row + width].max())
        if longest > best_length:
            best_length, best_end = longest, i - 1

    if best_length == 0:
        return Span.EMPTY
    return Span.from_zero_based(best_end - best_length + 1, best_length)
