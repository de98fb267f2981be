"""Configuration describing which files a scan processes."""

from __future__ import annotations

import codecs
import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import yaml

from .reader import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_PATTERNS",
    "DEFAULT_TRANSMISSIONS",
    "ScanConfig",
    "load_config",
]

DEFAULT_TRANSMISSIONS: tuple[str, ...] = ("transmission1.txt", "transmission2.txt")
DEFAULT_PATTERNS: tuple[str, ...] = ("mcode1.txt", "mcode2.txt", "mcode3.txt")

_KNOWN_KEYS = frozenset({"transmissions", "patterns", "encoding", "strict"})


@dataclass(frozen=True)
class ScanConfig:
    """Transmission and pattern files to analyse, in report order."""

    transmissions: tuple[Path, ...]
    patterns: tuple[Path, ...] = field(default_factory=tuple)
    encoding: str = DEFAULT_ENCODING
    strict: bool = False

    def __post_init__(self) -> None:
        if not self.transmissions:
            raise ValueError("At least one transmission file is required")
        _validate_encoding(self.encoding)

    @classmethod
    def default(cls, base_dir: Optional[Path] = None) -> "ScanConfig":
        """Return the built-in file list, resolved against *base_dir*."""

        base = Path(base_dir) if base_dir is not None else Path()
        return cls(
            transmissions=tuple(base / name for name in DEFAULT_TRANSMISSIONS),
            patterns=tuple(base / name for name in DEFAULT_PATTERNS),
        )

    def with_overrides(
        self,
        *,
        transmissions: Optional[Sequence[Path]] = None,
        patterns: Optional[Sequence[Path]] = None,
        encoding: Optional[str] = None,
        strict: Optional[bool] = None,
    ) -> "ScanConfig":
        """Return a copy with the supplied values replacing their fields.

        ``None`` and empty sequences leave the corresponding field untouched.
        """

        changes: dict[str, Any] = {}
        if transmissions:
            changes["transmissions"] = tuple(Path(item) for item in transmissions)
        if patterns:
            changes["patterns"] = tuple(Path(item) for item in patterns)
        if encoding is not None:
            changes["encoding"] = encoding
        if strict is not None:
            changes["strict"] = strict
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict[str, object]:
        return {
            "transmissions": [str(path) for path in self.transmissions],
            "patterns": [str(path) for path in self.patterns],
            "encoding": self.encoding,
            "strict": self.strict,
        }


def _validate_encoding(encoding: str) -> None:
    try:
        codecs.lookup(encoding)
    except (LookupError, TypeError) as exc:
        raise ValueError(f"Unknown text encoding: {encoding!r}") from exc


def _path_list(payload: Mapping[str, Any], key: str, base: Path) -> tuple[Path, ...]:
    entries = payload.get(key, [])
    if isinstance(entries, Mapping) or not isinstance(entries, (list, tuple)):
        raise ValueError(f"'{key}' must be a list of non-empty strings")
    paths: list[Path] = []
    for entry in entries:
        if not isinstance(entry, str) or not entry.strip():
            raise ValueError(f"'{key}' must be a list of non-empty strings")
        path = Path(entry.strip()).expanduser()
        paths.append(path if path.is_absolute() else base / path)
    return tuple(paths)


def _parse_document(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Failed to parse JSON from {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse YAML from {path}: {exc}") from exc


def load_config(path: Optional[Path | str]) -> ScanConfig:
    """Load a :class:`ScanConfig` from a JSON or YAML document.

    ``None`` returns :meth:`ScanConfig.default`.  Relative file names inside
    the document are resolved against the directory containing it.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValueError
        If the document is malformed or fails validation.
    """

    if path is None:
        return ScanConfig.default()

    path = Path(path).expanduser()
    payload = _parse_document(path)
    if not isinstance(payload, Mapping):
        raise ValueError(f"Configuration in {path} must be a mapping")

    unknown = sorted(str(key) for key in set(payload) - _KNOWN_KEYS)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    base = path.parent
    transmissions = _path_list(payload, "transmissions", base)
    if not transmissions:
        raise ValueError("At least one transmission file is required")
    patterns = _path_list(payload, "patterns", base)

    encoding = payload.get("encoding", DEFAULT_ENCODING)
    if not isinstance(encoding, str):
        raise ValueError("'encoding' must be a string")
    strict = payload.get("strict", False)
    if not isinstance(strict, bool):
        raise ValueError("'strict' must be a boolean")

    config = ScanConfig(
        transmissions=transmissions,
        patterns=patterns,
        encoding=encoding,
        strict=strict,
    )
    logger.debug(
        "Loaded configuration from %s: %d transmissions, %d patterns",
        path,
        len(config.transmissions),
        len(config.patterns),
    )
    return config
