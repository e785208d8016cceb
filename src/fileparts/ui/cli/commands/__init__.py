"""Command execution package for CLI."""

from fileparts.ui.cli.commands.executor import CommandExecutor
from fileparts.ui.cli.commands.join import JoinCommand
from fileparts.ui.cli.commands.probe import ProbeCommand
from fileparts.ui.cli.commands.split import SplitCommand

__all__ = ["CommandExecutor", "JoinCommand", "ProbeCommand", "SplitCommand"]
