"""Result types shared by the string algorithms.

Every algorithm works on 0-based indices internally and reports 1-based,
inclusive positions.  The helpers in this module own that conversion so the
algorithms never format positions themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

__all__ = [
    "CommonSubstringSpan",
    "MatchResult",
    "PalindromeSpan",
    "Span",
]


@dataclass(frozen=True)
class MatchResult:
    """Outcome of an exact pattern search.

    Attributes
    ----------
    position:
        1-based index of the first character of the first occurrence, or
        ``None`` when the pattern does not occur.
    """

    position: Optional[int] = None

    NOT_FOUND: ClassVar["MatchResult"]

    def __post_init__(self) -> None:
        if self.position is not None:
            if isinstance(self.position, bool) or not isinstance(self.position, int):
                raise TypeError("position must be an integer or None")
            if self.position < 1:
                raise ValueError("position is 1-based and must be at least 1")

    @classmethod
    def found_at(cls, position: int) -> "MatchResult":
        return cls(position=position)

    @property
    def found(self) -> bool:
        return self.position is not None

    def format(self) -> str:
        """Render the report line, ``true <position>`` or ``false``."""

        if self.position is None:
            return "false"
        return f"true {self.position}"

    def to_dict(self) -> dict[str, object]:
        return {"found": self.found, "position": self.position}


MatchResult.NOT_FOUND = MatchResult()


@dataclass(frozen=True)
class Span:
    """A 1-based inclusive ``(start, end)`` range; ``(0, 0)`` means empty."""

    start: int
    end: int

    EMPTY: ClassVar["Span"]

    def __post_init__(self) -> None:
        if self.start == 0 and self.end == 0:
            return
        if not 1 <= self.start <= self.end:
            raise ValueError(
                f"invalid span ({self.start}, {self.end}): expected (0, 0) "
                "or 1 <= start <= end"
            )

    @classmethod
    def from_zero_based(cls, start: int, length: int) -> "Span":
        """Build a span from a 0-based start index and a length."""

        if length <= 0:
            return cls.EMPTY
        return cls(start=start + 1, end=start + length)

    @property
    def is_empty(self) -> bool:
        return self.start == 0

    @property
    def length(self) -> int:
        if self.is_empty:
            return 0
        return self.end - self.start + 1

    def extract(self, text: str) -> str:
        """Return the slice of *text* covered by this span."""

        if self.is_empty:
            return ""
        return text[self.start - 1 : self.end]

    def format(self) -> str:
        return f"{self.start} {self.end}"

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}


Span.EMPTY = Span(0, 0)

# Spans reported by the palindrome and common-substring finders.  The common
# substring span is relative to the first text only.
PalindromeSpan = Span
CommonSubstringSpan = Span
