"""
Summary: Reassemble decomposed parts and join directories with file names.
Why: Guarantee exactly one separator between directory and name.
"""

from __future__ import annotations

from .errors import InvalidArgumentError
from .models import PathParts


def normalize_directory(directory: str, separator: str) -> str:
    """Return ``directory`` ending in exactly one ``separator``.

    An empty directory stays empty.
    """
    if not directory:
        return ""
    return directory.rstrip(separator) + separator


def assemble_path(parts: PathParts, separator: str) -> str:
    """Concatenate normalized directory, base name and extension of ``parts``."""

    return normalize_directory(parts.directory, separator) + parts.base_name + parts.extension


def join_directory(directory: str, name: str, separator: str) -> str:
    """Join ``directory`` and ``name`` with exactly one ``separator``.

    Raises:
        InvalidArgumentError: If ``directory`` is empty.
    """
    if not directory:
        raise InvalidArgumentError("Cannot join a file name onto an empty directory")
    return normalize_directory(directory, separator) + name


__all__ = ["assemble_path", "join_directory", "normalize_directory"]
