"""Command line interface for fileparts."""

import sys
from typing import final

from fileparts.platform.logging import logger
from fileparts.ui.cli.args import ArgumentParser
from fileparts.ui.cli.args.options import CLIArgs, JoinArgs, SplitArgs
from fileparts.ui.cli.commands import CommandExecutor, JoinCommand, ProbeCommand, SplitCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments and exit non-zero on failure.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            exit_code = CommandProcessor._build_command(args).execute()
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

        if exit_code:
            sys.exit(exit_code)

    @staticmethod
    def _build_command(args: CLIArgs) -> CommandExecutor:  # pyright: ignore[reportMissingTypeArgument]
        if isinstance(args, SplitArgs):
            return SplitCommand(args)
        if isinstance(args, JoinArgs):
            return JoinCommand(args)
        return ProbeCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
