"""
Summary: Error taxonomy for path decomposition and joining.
Why: Let callers catch package failures without matching on messages.
"""

from __future__ import annotations


class FilePartsError(Exception):
    """Base class for errors raised by the fileparts package."""


class InvalidArgumentError(FilePartsError, ValueError):
    """Raised when an operation receives an argument it cannot work with."""


__all__ = ["FilePartsError", "InvalidArgumentError"]
