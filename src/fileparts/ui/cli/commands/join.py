"""src/fileparts/ui/cli/commands/join.py
What: Join a directory and a file name from the command line.
Why: Make the single-separator join available to shell scripts.
"""

from typing import override

from fileparts.features.parts import InvalidArgumentError, join_path
from fileparts.platform.logging import logger
from fileparts.ui.cli.args.options import JoinArgs
from fileparts.ui.cli.commands.executor import CommandExecutor


class JoinCommand(CommandExecutor[JoinArgs]):
    """Command for joining a directory with a file name."""

    @override
    def execute(self) -> int:
        try:
            joined = join_path(self.args.directory, self.args.name, separator=self.args.separator)
        except InvalidArgumentError as e:
            logger.error("%s", e)
            return 1
        self.display.show_text(joined)
        return 0
