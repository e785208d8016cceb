"""src/fileparts/ui/cli/commands/probe.py
What: Report the filesystem kind of each requested path.
Why: Surface the directory and regular-file probes on the command line.
"""

from typing import override

from fileparts.platform.filesystem import is_directory, is_regular_file
from fileparts.ui.cli.args.options import ProbeArgs
from fileparts.ui.cli.commands.executor import CommandExecutor


class ProbeCommand(CommandExecutor[ProbeArgs]):
    """Command for probing paths."""

    @override
    def execute(self) -> int:
        for path in self.args.paths:
            self.display.show_probe(
                path,
                is_directory=is_directory(path),
                is_file=is_regular_file(path),
            )
        return 0
