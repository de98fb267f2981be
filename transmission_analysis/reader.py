"""Loading transmission and pattern files into memory."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_ENCODING", "TransmissionFileError", "read_transmission"]

# One character per byte, so reported positions are byte positions.
DEFAULT_ENCODING = "latin-1"


class TransmissionFileError(RuntimeError):
    """Raised in strict mode when an input file cannot be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Unable to read {path}: {reason}")
        self.path = path


def read_transmission(
    path: Path | str,
    *,
    encoding: str = DEFAULT_ENCODING,
    strict: bool = False,
) -> str:
    """Return the full content of *path* with normalised line terminators.

    ``\\r\\n`` and ``\\r`` become ``\\n`` and a single trailing ``\\n`` is
    dropped.  When the file cannot be opened or decoded an error is logged
    and an empty string is returned, which callers treat as "skip this
    input".  With ``strict=True`` a :class:`TransmissionFileError` is raised
    instead.
    """

    path = Path(path)
    try:
        content = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        if strict:
            raise TransmissionFileError(path, str(exc)) from exc
        logger.error("Error opening file %s: %s", path, exc)
        return ""

    if content.endswith("\n"):
        content = content[:-1]
    logger.debug("Loaded %s (%d characters)", path, len(content))
    return content
