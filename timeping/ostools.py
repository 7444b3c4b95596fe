"""Small file-system helpers."""

from __future__ import annotations

import os
from typing import TextIO


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` can be stat'ed, False otherwise."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def open_file(path: str | os.PathLike[str]) -> TextIO:
    """Open ``path`` for reading and writing, creating it (mode 0644) if needed.

    Existing content is kept; the caller owns the returned handle.
    """
    fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
    try:
        return os.fdopen(fd, "r+", encoding="utf-8")
    except Exception:
        os.close(fd)
        raise


def create_file(path: str | os.PathLike[str]) -> None:
    """Create ``path`` as an empty file, truncating it if it already exists."""
    with open(path, "w", encoding="utf-8"):
        pass