"""Command line argument handling package."""

from fileparts.ui.cli.args.parser import ArgumentParser
from fileparts.ui.cli.args.options import CLIArgs, JoinArgs, ProbeArgs, SplitArgs

__all__ = ["ArgumentParser", "CLIArgs", "JoinArgs", "ProbeArgs", "SplitArgs"]
