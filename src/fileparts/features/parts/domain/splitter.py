"""
Summary: Split a path string into directory, base name and extension.
Why: Keep the string rules free of filesystem access so they test on any platform.
"""

from __future__ import annotations

from .models import DotfilePolicy, PathParts


def _extension_start(name: str, dotfile_policy: DotfilePolicy) -> int:
    """Return the index in ``name`` where the extension begins.

    ``len(name)`` means the name has no extension.
    """
    dot_index = name.rfind(".")
    if dot_index < 0:
        return len(name)
    if dotfile_policy is DotfilePolicy.NAME and not name[:dot_index].strip("."):
        # Only leading dots precede this one.
        return len(name)
    return dot_index


def split_path(
    path: str,
    *,
    separator: str,
    dotfile_policy: DotfilePolicy = DotfilePolicy.EXTENSION,
) -> PathParts:
    """Split ``path`` into its parts without touching the filesystem.

    Args:
        path: Path string to split.
        separator: Directory separator used by ``path``.
        dotfile_policy: How a leading dot in the file name is treated.

    Returns:
        PathParts: Parts whose concatenation equals ``path``.
    """
    directory_end = path.rfind(separator) + 1
    directory = path[:directory_end]
    name = path[directory_end:]

    extension_start = _extension_start(name, dotfile_policy)
    return PathParts(
        directory=directory,
        base_name=name[:extension_start],
        extension=name[extension_start:],
        full_path=path,
    )


__all__ = ["split_path"]
