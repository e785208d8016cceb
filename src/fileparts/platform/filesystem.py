"""Filesystem probes reused across multiple layers."""

from __future__ import annotations

import os
import stat


def _stat_mode(path: str | os.PathLike[str]) -> int | None:
    """Return the ``st_mode`` of ``path`` or ``None`` when it cannot be stat'ed."""

    try:
        return os.stat(path).st_mode
    except (OSError, ValueError):
        # Missing, inaccessible, or malformed (e.g. embedded NUL) paths.
        return None


def is_directory(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` exists and names a directory. Never raises."""

    mode = _stat_mode(path)
    return mode is not None and stat.S_ISDIR(mode)


def is_regular_file(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` exists and names a regular file. Never raises."""

    mode = _stat_mode(path)
    return mode is not None and stat.S_ISREG(mode)


__all__ = ["is_directory", "is_regular_file"]
