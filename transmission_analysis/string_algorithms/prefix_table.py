"""Prefix-function (failure table) construction for exact matching."""

from __future__ import annotations

from typing import List

__all__ = ["build_prefix_table"]


def build_prefix_table(pattern: str) -> List[int]:
    """Return the prefix function of *pattern*.

    Entry ``i`` holds the length of the longest proper prefix of
    ``pattern[: i + 1]`` that is also a suffix of it.  The first entry is
    always ``0`` and every entry satisfies ``table[i] <= i``.  An empty
    pattern yields an empty table.

    The scan runs in amortised O(m): a mismatch falls back through the
    already computed entries without advancing the scan index.

    Raises
    ------
    TypeError
        If *pattern* is not a string.
    """

    if not isinstance(pattern, str):
        raise TypeError("pattern must be a string")

    m = len(pattern)
    table: List[int] = [0] * m
    matched = 0
    i = 1
    while i < m:
        if pattern[i] == pattern[matched]:
            matched += 1
            table[i] = matched
            i += 1
        elif matched != 0:
            matched = table[matched - 1]
        else:
            table[i] = 0
            i += 1
    return table
