"""src/fileparts/ui/cli/commands/split.py
What: Decompose each requested path and print its report.
Why: Expose the decomposition record for manual inspection.
"""

from typing import override

from fileparts.features.parts import decompose
from fileparts.platform.logging import logger
from fileparts.ui.cli.args.options import SplitArgs
from fileparts.ui.cli.commands.executor import CommandExecutor


class SplitCommand(CommandExecutor[SplitArgs]):
    """Command for decomposing file paths."""

    @override
    def execute(self) -> int:
        failed = 0
        for path in self.args.paths:
            parts = decompose(
                path,
                separator=self.args.separator,
                dotfile_policy=self.args.dotfile_policy,
            )
            if parts is None:
                logger.error("Not a regular file: %s", path)
                failed += 1
                continue
            self.display.show_parts(parts, separator=self.args.separator)
        return 1 if failed else 0
