"""
Summary: Decompose existing regular files into their path parts.
Why: Bind the pure splitter to the filesystem probe and configured settings.
"""

from __future__ import annotations

import os

from fileparts.config import settings
from fileparts.features.parts.domain import (
    DotfilePolicy,
    PathParts,
    split_path,
    validate_separator,
)
from fileparts.platform.filesystem import is_regular_file
from fileparts.platform.logging import logger


def decompose(
    path: str | os.PathLike[str],
    *,
    separator: str | None = None,
    dotfile_policy: DotfilePolicy | None = None,
) -> PathParts | None:
    """Decompose ``path`` into directory, base name and extension.

    Args:
        path: Path of an existing regular file.
        separator: Directory separator; defaults to the configured one.
        dotfile_policy: Leading-dot rule; defaults to the configured one.

    Returns:
        PathParts | None: The parts, or ``None`` when ``path`` does not exist
        or is not a regular file.

    Raises:
        InvalidArgumentError: If an explicit ``separator`` is unsupported.
    """
    raw_path = os.fspath(path)
    sep = validate_separator(separator) if separator is not None else settings.PATH_SEPARATOR
    policy = dotfile_policy if dotfile_policy is not None else settings.DOTFILE_POLICY

    if not is_regular_file(raw_path):
        logger.debug(
            "Not a regular file: %s",
            raw_path,
            extra={"parts_event": "parts.decompose.absent", "source_path": raw_path},
        )
        return None

    parts = split_path(raw_path, separator=sep, dotfile_policy=policy)
    logger.debug(
        "Decomposed %s",
        raw_path,
        extra={
            "parts_event": "parts.decompose.success",
            "source_path": raw_path,
            "directory": parts.directory,
            "base_name": parts.base_name,
            "extension": parts.extension,
        },
    )
    return parts


__all__ = ["decompose"]
