"""End-to-end tests for :func:`transmission_analysis.analyze`."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

import transmission_analysis.analysis as analysis_module
from transmission_analysis import (
    ScanConfig,
    TransmissionFileError,
    analyze,
)
from transmission_analysis.string_algorithms import Span

FIRST = "xxabcyyracecar"
SECOND = "abcracecarzz"


def _write_inputs(directory: Path) -> ScanConfig:
    (directory / "transmission1.txt").write_text(FIRST + "\n", encoding="latin-1")
    (directory / "transmission2.txt").write_text(SECOND + "\n", encoding="latin-1")
    (directory / "mcode1.txt").write_text("abc\n", encoding="latin-1")
    (directory / "mcode2.txt").write_text("zz\n", encoding="latin-1")
    (directory / "mcode3.txt").write_text("", encoding="latin-1")
    return ScanConfig.default(directory)


def test_report_lines_follow_stage_order(tmp_path: Path) -> None:
    report = analyze(_write_inputs(tmp_path))

    assert list(report.lines()) == [
        "true 3",
        "false",
        "true 1",
        "true 11",
        "8 14",
        "4 10",
        "8 14",
    ]
    assert report.missing == ()


def test_empty_pattern_file_is_skipped(tmp_path: Path) -> None:
    report = analyze(_write_inputs(tmp_path))
    assert all(match.pattern.name != "mcode3.txt" for match in report.matches)
    assert len(report.matches) == 4


def test_missing_transmission_degrades_silently(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    config = _write_inputs(tmp_path)
    missing = tmp_path / "transmission2.txt"
    missing.unlink()

    with caplog.at_level(logging.ERROR):
        report = analyze(config)

    assert list(report.lines()) == ["true 3", "false", "8 14", "0 0"]
    assert report.common_substring is None
    assert report.missing == (missing,)
    assert "transmission2.txt" in caplog.text


def test_empty_transmission_skips_patterns_and_common_substring(tmp_path: Path) -> None:
    config = _write_inputs(tmp_path)
    (tmp_path / "transmission1.txt").write_text("", encoding="latin-1")

    report = analyze(config)

    assert [match.transmission.name for match in report.matches] == [
        "transmission2.txt",
        "transmission2.txt",
    ]
    assert report.palindromes[0].span is Span.EMPTY
    assert report.common_substring is None
    assert report.missing == ()


def test_single_transmission_has_no_common_substring(tmp_path: Path) -> None:
    config = _write_inputs(tmp_path)
    single = ScanConfig(transmissions=config.transmissions[:1], patterns=())
    report = analyze(single)
    assert list(report.lines()) == ["8 14"]


def test_strict_mode_aborts_on_missing_file(tmp_path: Path) -> None:
    config = _write_inputs(tmp_path).with_overrides(strict=True)
    (tmp_path / "mcode2.txt").unlink()
    with pytest.raises(TransmissionFileError):
        analyze(config)


def test_each_file_is_read_once(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    config = _write_inputs(tmp_path)
    config = config.with_overrides(patterns=list(config.patterns) * 2)
    calls: list[Path] = []
    original = analysis_module.read_transmission

    def counting_reader(path, **kwargs):  # noqa: ANN001, ANN202 - test double
        calls.append(path)
        return original(path, **kwargs)

    monkeypatch.setattr(analysis_module, "read_transmission", counting_reader)
    report = analyze(config)

    assert len(calls) == len(set(calls)) == 5
    assert len(report.matches) == 8


def test_to_dict_is_json_serialisable(tmp_path: Path) -> None:
    report = analyze(_write_inputs(tmp_path))
    payload = json.loads(json.dumps(report.to_dict()))

    assert payload["matches"][0] == {
        "transmission": str(tmp_path / "transmission1.txt"),
        "pattern": str(tmp_path / "mcode1.txt"),
        "found": True,
        "position": 3,
    }
    assert [item["value"] for item in payload["palindromes"]] == ["racecar", "racecar"]
    assert payload["common_substring"] == {"start": 8, "end": 14, "value": "racecar"}
    assert payload["missing"] == []
