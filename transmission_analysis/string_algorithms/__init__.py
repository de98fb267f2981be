"""String algorithms used to analyse transmissions."""

from .exact_match import find_first_occurrence
from .longest_common_substring import longest_common_substring
from .longest_palindromic_substring import longest_palindromic_substring
from .prefix_table import build_prefix_table
from .spans import CommonSubstringSpan, MatchResult, PalindromeSpan, Span

__all__ = [
    "CommonSubstringSpan",
    "MatchResult",
    "PalindromeSpan",
    "Span",
    "build_prefix_table",
    "find_first_occurrence",
    "longest_common_substring",
    "longest_palindromic_substring",
]
