"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from fileparts.features.parts import DotfilePolicy


@final
@dataclass(slots=True)
class SplitArgs:
    """Command line arguments for the ``split`` subcommand."""

    command: Literal["split"]
    paths: list[str]
    separator: str | None
    dotfile_policy: DotfilePolicy | None


@final
@dataclass(slots=True)
class JoinArgs:
    """Command line arguments for the ``join`` subcommand."""

    command: Literal["join"]
    directory: str
    name: str
    separator: str | None


@final
@dataclass(slots=True)
class ProbeArgs:
    """Command line arguments for the ``probe`` subcommand."""

    command: Literal["probe"]
    paths: list[str]


CLIArgs = SplitArgs | JoinArgs | ProbeArgs

__all__ = ["CLIArgs", "JoinArgs", "ProbeArgs", "SplitArgs"]
