"""Inspect filesystem paths and split them into directory, base name and extension."""

from fileparts.features.parts import (
    DotfilePolicy,
    FilePartsError,
    InvalidArgumentError,
    PathParts,
    decompose,
    join_path,
    reconstruct,
    split_path,
)
from fileparts.platform.filesystem import is_directory, is_regular_file

__all__ = [
    "DotfilePolicy",
    "FilePartsError",
    "InvalidArgumentError",
    "PathParts",
    "decompose",
    "is_directory",
    "is_regular_file",
    "join_path",
    "reconstruct",
    "split_path",
]
