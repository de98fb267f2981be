"""Scan transmissions for malicious code, palindromes and shared substrings.

The report is written to standard output, one result per line:

* ``true <position>`` or ``false`` for every (transmission, pattern) pair,
* ``<start> <end>`` for the longest palindrome of every transmission,
* ``<start> <end>`` for the longest substring shared by the first two
  transmissions, when both could be read.

Positions are 1-based and inclusive.  Diagnostics go to standard error.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Mapping, Sequence

from transmission_analysis import (
    ScanConfig,
    TransmissionFileError,
    analyze,
    load_config,
)

logger = logging.getLogger(__name__)


def write_report(payload: Mapping[str, object], path: Path) -> None:
    """Write the JSON form of a scan report to ``path``."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(dict(payload), handle, indent=2, sort_keys=True)
        handle.write("\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON or YAML file listing transmissions and patterns",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Directory holding the default transmission and pattern files",
    )
    parser.add_argument(
        "--transmission",
        dest="transmissions",
        type=Path,
        action="append",
        default=None,
        help="Transmission file to scan (repeatable, replaces the configured list)",
    )
    parser.add_argument(
        "--pattern",
        dest="patterns",
        type=Path,
        action="append",
        default=None,
        help="Malicious code pattern file (repeatable, replaces the configured list)",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Text encoding of the input files (default: latin-1)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional path for a JSON version of the report",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Exit with status 3 when an input file cannot be read (--no-strict overrides the config)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> ScanConfig:
    if args.config is not None:
        config = load_config(args.config)
    else:
        config = ScanConfig.default(args.base_dir)
    return config.with_overrides(
        transmissions=args.transmissions,
        patterns=args.patterns,
        encoding=args.encoding,
        strict=args.strict,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level, logging.WARNING))

    try:
        config = _resolve_config(args)
    except (OSError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    try:
        report = analyze(config)
    except TransmissionFileError as exc:
        logger.error("Scan aborted: %s", exc)
        return 3

    for line in report.lines():
        print(line)

    if args.output is not None:
        try:
            write_report(report.to_dict(), args.output)
        except OSError as exc:
            logger.error("Failed to write report: %s", exc)
            return 2
        logger.info("JSON report written to %s", args.output)

    if report.missing:
        logger.warning(
            "Skipped %d unreadable file(s): %s",
            len(report.missing),
            ", ".join(str(path) for path in report.missing),
        )
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
