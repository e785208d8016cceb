"""
Summary: Directory separator constants and validation.
Why: Keep the platform separator a runtime value that callers can inject.
"""

from __future__ import annotations

import os
from typing import Final

from .errors import InvalidArgumentError

POSIX_SEPARATOR: Final[str] = "/"
WINDOWS_SEPARATOR: Final[str] = "\\"
SUPPORTED_SEPARATORS: Final[tuple[str, ...]] = (POSIX_SEPARATOR, WINDOWS_SEPARATOR)


def platform_separator() -> str:
    """Return the separator used by the running platform."""

    return WINDOWS_SEPARATOR if os.sep == WINDOWS_SEPARATOR else POSIX_SEPARATOR


def validate_separator(separator: str) -> str:
    """Return ``separator`` unchanged when it is a supported separator.

    Raises:
        InvalidArgumentError: If ``separator`` is not ``/`` or ``\\``.
    """
    if separator not in SUPPORTED_SEPARATORS:
        valid = " or ".join(repr(s) for s in SUPPORTED_SEPARATORS)
        msg = f"Unsupported path separator {separator!r}. Expected {valid}"
        raise InvalidArgumentError(msg)
    return separator


__all__ = [
    "POSIX_SEPARATOR",
    "SUPPORTED_SEPARATORS",
    "WINDOWS_SEPARATOR",
    "platform_separator",
    "validate_separator",
]
