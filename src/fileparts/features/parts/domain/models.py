"""
Summary: Value objects describing a decomposed file path.
Why: Give every layer one immutable record of directory, base name and extension.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .errors import InvalidArgumentError


class DotfilePolicy(str, Enum):
    """Decide whether a leading dot in a file name starts an extension.

    ``EXTENSION`` treats ``.bashrc`` as an empty base name with extension
    ``.bashrc``. ``NAME`` treats it as base name ``.bashrc`` without extension.
    Names with a later dot (``.config.yml``) split the same way under both.
    """

    EXTENSION = "extension"
    NAME = "name"

    @staticmethod
    def from_user_input(value: object) -> "DotfilePolicy":
        """Translate raw CLI or config input into the matching policy.

        Raises:
            InvalidArgumentError: If ``value`` is not a string naming a policy.
        """

        valid: Final[str] = ", ".join(p.value for p in DotfilePolicy)
        if isinstance(value, str):
            normalized = value.strip().lower()
            for policy in DotfilePolicy:
                if policy.value == normalized:
                    return policy
        msg = f"Unsupported dotfile policy {value!r}. Valid options: {valid}"
        raise InvalidArgumentError(msg)


@dataclass(slots=True, frozen=True)
class PathParts:
    """Directory, base name and extension of a file path.

    Attributes:
        directory: Everything up to and including the final separator, or ``""``.
        base_name: File name without its extension.
        extension: Final ``.`` of the file name and what follows it, or ``""``.
        full_path: The path exactly as it was decomposed.
    """

    directory: str
    base_name: str
    extension: str
    full_path: str

    @property
    def name(self) -> str:
        """File name including the extension."""
        return self.base_name + self.extension

    @property
    def has_directory(self) -> bool:
        """Whether the decomposed path carried a directory segment."""
        return self.directory != ""


__all__ = ["DotfilePolicy", "PathParts"]
