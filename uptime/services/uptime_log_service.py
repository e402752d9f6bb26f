"""Uptime log and marker file operations.

None of these functions raise on filesystem errors. Each returns a
``FileOpResult`` so the caller can record what happened and keep going.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileOpResult:
    path: Path
    ok: bool
    error: str | None = None


def _failed(path: Path, action: str, exc: OSError) -> FileOpResult:
    logger.warning("Failed to %s %s: %s", action, path, exc)
    return FileOpResult(path=path, ok=False, error=str(exc))


def ensure_folder(folder: Path) -> FileOpResult:
    """Create the local uptime folder if it is missing."""
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return _failed(folder, "create folder", exc)
    return FileOpResult(path=folder, ok=True)


def append_line(path: Path, line: str) -> FileOpResult:
    """Append ``line`` plus a newline, creating the file if absent.

    The handle is closed before returning so the line is on disk before
    any later step looks at the folder.
    """
    try:
        with path.open("a", encoding="utf-8") as f:
            f.write(f"{line}\n")
    except OSError as exc:
        return _failed(path, "append to", exc)
    logger.debug("Appended %r to %s", line, path)
    return FileOpResult(path=path, ok=True)


def overwrite_line(path: Path, line: str) -> FileOpResult:
    """Replace the whole content of ``path`` with ``line`` plus a newline."""
    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(f"{line}\n")
    except OSError as exc:
        return _failed(path, "overwrite", exc)
    logger.debug("Wrote %r to %s", line, path)
    return FileOpResult(path=path, ok=True)


def remove_marker(path: Path) -> FileOpResult:
    """Delete the marker file. A marker that is already gone counts as success."""
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        return _failed(path, "remove", exc)
    return FileOpResult(path=path, ok=True)
