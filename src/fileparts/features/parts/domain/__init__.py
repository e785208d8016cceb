"""
Summary: Domain layer for path decomposition.
Why: Re-export value objects and pure string rules for the use cases.
"""

from .assembly import assemble_path, join_directory, normalize_directory
from .errors import FilePartsError, InvalidArgumentError
from .models import DotfilePolicy, PathParts
from .separators import (
    POSIX_SEPARATOR,
    SUPPORTED_SEPARATORS,
    WINDOWS_SEPARATOR,
    platform_separator,
    validate_separator,
)
from .splitter import split_path

__all__ = [
    "DotfilePolicy",
    "FilePartsError",
    "InvalidArgumentError",
    "POSIX_SEPARATOR",
    "PathParts",
    "SUPPORTED_SEPARATORS",
    "WINDOWS_SEPARATOR",
    "assemble_path",
    "join_directory",
    "normalize_directory",
    "platform_separator",
    "split_path",
    "validate_separator",
]
