"""Run every analysis over the configured transmissions and patterns.

The scan has three independent stages that share the loaded file contents:

1. exact search of every pattern inside every transmission,
2. the longest palindrome of each transmission,
3. the longest substring common to the first two transmissions.

Unavailable or empty inputs are skipped rather than treated as failures,
unless the configuration asks for strict loading.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, Optional

from .config import ScanConfig
from .reader import TransmissionFileError, read_transmission
from .string_algorithms import (
    CommonSubstringSpan,
    MatchResult,
    PalindromeSpan,
    find_first_occurrence,
    longest_common_substring,
    longest_palindromic_substring,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AnalysisReport",
    "PalindromeFinding",
    "PatternMatch",
    "analyze",
]


@dataclass(frozen=True)
class PatternMatch:
    """Search result for one (transmission, pattern) pair."""

    transmission: Path
    pattern: Path
    result: MatchResult

    def to_dict(self) -> dict[str, object]:
        return {
            "transmission": str(self.transmission),
            "pattern": str(self.pattern),
            **self.result.to_dict(),
        }


@dataclass(frozen=True)
class PalindromeFinding:
    """Longest palindrome located in a single transmission."""

    transmission: Path
    span: PalindromeSpan
    value: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "transmission": str(self.transmission),
            **self.span.to_dict(),
            "value": self.value,
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Everything a scan produced, in report order."""

    matches: tuple[PatternMatch, ...]
    palindromes: tuple[PalindromeFinding, ...]
    common_substring: Optional[CommonSubstringSpan] = None
    common_value: str = ""
    missing: tuple[Path, ...] = field(default_factory=tuple)

    def lines(self) -> Iterator[str]:
        """Yield the plain-text report, one result per line."""

        for match in self.matches:
            yield match.result.format()
        for finding in self.palindromes:
            yield finding.span.format()
        if self.common_substring is not None:
            yield self.common_substring.format()

    def to_dict(self) -> dict[str, object]:
        common: Optional[dict[str, object]] = None
        if self.common_substring is not None:
            common = {**self.common_substring.to_dict(), "value": self.common_value}
        return {
            "matches": [match.to_dict() for match in self.matches],
            "palindromes": [finding.to_dict() for finding in self.palindromes],
            "common_substring": common,
            "missing": [str(path) for path in self.missing],
        }


class _ContentCache:
    """Reads each distinct path once and remembers which ones failed."""

    def __init__(self, config: ScanConfig) -> None:
        self._config = config
        self._contents: Dict[Path, str] = {}
        self.missing: list[Path] = []

    def __getitem__(self, path: Path) -> str:
        if path not in self._contents:
            try:
                content = read_transmission(
                    path, encoding=self._config.encoding, strict=True
                )
            except TransmissionFileError as exc:
                if self._config.strict:
                    raise
                logger.error("%s", exc)
                self.missing.append(path)
                content = ""
            self._contents[path] = content
        return self._contents[path]


def analyze(config: ScanConfig) -> AnalysisReport:
    """Run the three analyses described by *config*.

    Raises
    ------
    TransmissionFileError
        If ``config.strict`` is set and an input file cannot be read.
    """

    contents = _ContentCache(config)

    matches: list[PatternMatch] = []
    for transmission in config.transmissions:
        text = contents[transmission]
        if not text:
            logger.info("Skipping pattern search in empty transmission %s", transmission)
            continue
        for pattern_path in config.patterns:
            pattern = contents[pattern_path]
            if not pattern:
                logger.info("Skipping empty pattern %s", pattern_path)
                continue
            result = find_first_occurrence(text, pattern)
            logger.debug("%s in %s: %s", pattern_path, transmission, result.format())
            matches.append(PatternMatch(transmission, pattern_path, result))
    logger.info("Pattern search produced %d results", len(matches))

    palindromes: list[PalindromeFinding] = []
    for transmission in config.transmissions:
        text = contents[transmission]
        span = longest_palindromic_substring(text)
        logger.debug("Longest palindrome in %s: %s", transmission, span.format())
        palindromes.append(PalindromeFinding(transmission, span, span.extract(text)))

    common: Optional[CommonSubstringSpan] = None
    common_value = ""
    if len(config.transmissions) >= 2:
        first = contents[config.transmissions[0]]
        second = contents[config.transmissions[1]]
        if first and second:
            common = longest_common_substring(first, second)
            common_value = common.extract(first)
            logger.info("Longest common substring spans %s", common.format())
        else:
            logger.info("Skipping common substring search: a transmission is empty")

    return AnalysisReport(
        matches=tuple(matches),
        palindromes=tuple(palindromes),
        common_substring=common,
        common_value=common_value,
        missing=tuple(contents.missing),
    )
