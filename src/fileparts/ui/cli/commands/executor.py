"""src/fileparts/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from fileparts.ui.cli.args.options import CLIArgs
from fileparts.ui.cli.display import PartsDisplay

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    display: PartsDisplay

    def __init__(self, args: ArgsT, display: PartsDisplay | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            display: Output renderer; a default console display when omitted.
        """
        self.args = args
        self.display = display or PartsDisplay()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        pass
