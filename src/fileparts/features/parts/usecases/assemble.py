"""
Summary: Reconstruct full paths and join directories with file names.
Why: Apply the configured separator to the pure assembly rules.
"""

from __future__ import annotations

from fileparts.config import settings
from fileparts.features.parts.domain import (
    InvalidArgumentError,
    PathParts,
    assemble_path,
    join_directory,
    validate_separator,
)
from fileparts.platform.logging import logger


def _resolve(separator: str | None) -> str:
    return validate_separator(separator) if separator is not None else settings.PATH_SEPARATOR


def reconstruct(parts: PathParts, *, separator: str | None = None) -> str:
    """Return the full path described by ``parts``.

    A non-empty directory is normalized to end in exactly one separator; an
    empty one yields a bare ``base_name + extension``. ``parts`` is not modified.
    """
    return assemble_path(parts, _resolve(separator))


def join_path(directory: str, name: str, *, separator: str | None = None) -> str:
    """Join ``directory`` and ``name`` with exactly one separator between them.

    Raises:
        InvalidArgumentError: If ``directory`` is empty or ``separator`` is unsupported.
    """
    sep = _resolve(separator)
    try:
        return join_directory(directory, name, sep)
    except InvalidArgumentError as e:
        logger.debug(
            "Join rejected for directory %r and name %r: %s",
            directory,
            name,
            e,
            extra={
                "parts_event": "parts.join.error",
                "directory": directory,
                "file_name": name,
                "error_message": str(e),
            },
        )
        raise


__all__ = ["join_path", "reconstruct"]
