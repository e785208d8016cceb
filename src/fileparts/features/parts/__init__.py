# Path: `src/fileparts/features/parts/__init__.py`
# Summary: Export path decomposition domain and use case symbols.
# Why: Provide a stable import surface for the CLI and tests.

from .domain import (
    DotfilePolicy,
    FilePartsError,
    InvalidArgumentError,
    PathParts,
    split_path,
)
from .usecases import decompose, join_path, reconstruct

__all__ = [
    "DotfilePolicy",
    "FilePartsError",
    "InvalidArgumentError",
    "PathParts",
    "decompose",
    "join_path",
    "reconstruct",
    "split_path",
]
