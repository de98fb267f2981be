"""Pattern, palindrome and common-substring analysis of transmission files.

The algorithms live in :mod:`transmission_analysis.string_algorithms` and are
pure functions over in-memory text.  :func:`analyze` wires them to the files
named by a :class:`ScanConfig`.
"""

from __future__ import annotations

from .analysis import AnalysisReport, PalindromeFinding, PatternMatch, analyze
from .config import DEFAULT_PATTERNS, DEFAULT_TRANSMISSIONS, ScanConfig, load_config
from .reader import DEFAULT_ENCODING, TransmissionFileError, read_transmission

__all__ = [
    "AnalysisReport",
    "DEFAULT_ENCODING",
    "DEFAULT_PATTERNS",
    "DEFAULT_TRANSMISSIONS",
    "PalindromeFinding",
    "PatternMatch",
    "ScanConfig",
    "TransmissionFileError",
    "analyze",
    "load_config",
    "read_transmission",
]

__version__ = "0.1.0"
