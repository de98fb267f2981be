"""Flat numpy buffers backing the dynamic-programming tables."""

from __future__ import annotations

import numpy as np

__all__ = ["code_points", "flat_table", "run_length_dtype"]


def code_points(text: str) -> np.ndarray:
    """Return *text* as a 1-D ``uint32`` array with one entry per character."""

    if not text:
        return np.zeros(0, dtype=np.uint32)
    return np.frombuffer(text.encode("utf-32-le", "surrogatepass"), dtype="<u4")


def flat_table(rows: int, columns: int, dtype: np.dtype | type) -> np.ndarray:
    """Allocate a zeroed ``rows x columns`` table as one contiguous buffer.

    Cell ``(r, c)`` lives at offset ``r * columns + c``.
    """

    return np.zeros(rows * columns, dtype=dtype)


def run_length_dtype(limit: int) -> np.dtype:
    """Return the smallest unsigned dtype able to hold counts up to *limit*."""

    return np.min_scalar_type(max(limit, 0))
