"""src/fileparts/ui/cli/display/report.py
What: Render the human-readable report of a decomposed path.
Why: Let users inspect every part alongside the reconstructed path.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from fileparts.features.parts import PathParts, reconstruct


def format_parts_report(parts: PathParts, *, separator: str | None = None) -> list[str]:
    """Return the report lines for ``parts``."""

    return [
        f"Directory     = {parts.directory}",
        f"Base name     = {parts.base_name}",
        f"Extension     = {parts.extension}",
        f"Full path     = {parts.full_path}",
        f"Reconstructed = {reconstruct(parts, separator=separator)}",
    ]


@final
class PartsDisplay:
    """Handles path part display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_parts(self, parts: PathParts, *, separator: str | None = None) -> None:
        """Print the report for ``parts`` followed by a blank line."""

        for line in format_parts_report(parts, separator=separator):
            self.console.print(escape(line), highlight=False)
        self.console.print()

    def show_probe(self, path: str, *, is_directory: bool, is_file: bool) -> None:
        """Print what kind of filesystem entry ``path`` is."""

        if is_directory:
            kind = "[cyan]directory[/cyan]"
        elif is_file:
            kind = "[green]regular file[/green]"
        else:
            kind = "[yellow]neither[/yellow]"
        self.console.print(f"{escape(path)}: {kind}", highlight=False)

    def show_text(self, text: str) -> None:
        """Print ``text`` without markup or highlighting."""

        self.console.print(escape(text), highlight=False, soft_wrap=True)
