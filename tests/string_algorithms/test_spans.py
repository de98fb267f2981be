from __future__ import annotations

import pytest

from transmission_analysis.string_algorithms import MatchResult, Span


def test_match_result_formatting() -> None:
    assert MatchResult.found_at(4).format() == "true 4"
    assert MatchResult.NOT_FOUND.format() == "false"
    assert MatchResult.NOT_FOUND.to_dict() == {"found": False, "position": None}
    assert MatchResult.found_at(1).to_dict() == {"found": True, "position": 1}


@pytest.mark.parametrize("position", [0, -3])
def test_match_result_rejects_non_positive_positions(position: int) -> None:
    with pytest.raises(ValueError):
        MatchResult.found_at(position)


def test_match_result_rejects_booleans() -> None:
    with pytest.raises(TypeError):
        MatchResult(position=True)  # type: ignore[arg-type]


def test_span_from_zero_based() -> None:
    span = Span.from_zero_based(2, 4)
    assert span == Span(3, 6)
    assert span.length == 4
    assert span.format() == "3 6"
    assert Span.from_zero_based(5, 0) is Span.EMPTY


def test_empty_span() -> None:
    assert Span.EMPTY.is_empty
    assert Span.EMPTY.length == 0
    assert Span.EMPTY.extract("abc") == ""
    assert Span.EMPTY.to_dict() == {"start": 0, "end": 0}


def test_extract_uses_inclusive_one_based_bounds() -> None:
    assert Span(2, 3).extract("zabz") == "ab"
    assert Span(1, 1).extract("q") == "q"


@pytest.mark.parametrize("start,end", [(0, 3), (3, 2), (-1, 1)])
def test_span_rejects_invalid_bounds(start: int, end: int) -> None:
    with pytest.raises(ValueError):
        Span(start, end)
