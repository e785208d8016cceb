"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from fileparts.config.config import Config
from fileparts.features.parts import DotfilePolicy, InvalidArgumentError
from fileparts.features.parts.domain import SUPPORTED_SEPARATORS, validate_separator
from fileparts.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from fileparts.ui.cli.args.options import CLIArgs, JoinArgs, ProbeArgs, SplitArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="fileparts",
            description="fileparts - inspect paths and split them into directory, base name and extension.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        split_parser = subparsers.add_parser(
            "split",
            help="Decompose regular files into directory, base name and extension",
        )
        _ = split_parser.add_argument(
            "paths",
            nargs="+",
            help="Paths of regular files to decompose",
            metavar="PATH",
        )
        _ = split_parser.add_argument(
            "--dotfile-policy",
            type=str,
            choices=[policy.value for policy in DotfilePolicy],
            help="Whether a leading dot starts an extension (defaults to configuration)",
        )
        ArgumentParser._add_separator_option(split_parser)
        ArgumentParser._add_verbosity_options(split_parser)

        join_parser = subparsers.add_parser(
            "join",
            help="Join a directory and a file name with exactly one separator",
        )
        _ = join_parser.add_argument("directory", type=str, metavar="DIRECTORY")
        _ = join_parser.add_argument("name", type=str, metavar="NAME")
        ArgumentParser._add_separator_option(join_parser)
        ArgumentParser._add_verbosity_options(join_parser)

        probe_parser = subparsers.add_parser(
            "probe",
            help="Report whether paths are directories or regular files",
        )
        _ = probe_parser.add_argument("paths", nargs="+", metavar="PATH")
        ArgumentParser._add_verbosity_options(probe_parser)

        return parser

    @staticmethod
    def _add_separator_option(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--separator",
            type=str,
            help=f"Directory separator, one of {' '.join(SUPPORTED_SEPARATORS)} (defaults to configuration)",
            metavar="CHAR",
        )

    @staticmethod
    def _add_verbosity_options(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "split":
            return SplitArgs(
                command="split",
                paths=list(parsed_args.paths),
                separator=ArgumentParser._validated_separator(parsed_args.separator),
                dotfile_policy=(
                    DotfilePolicy.from_user_input(parsed_args.dotfile_policy)
                    if parsed_args.dotfile_policy
                    else None
                ),
            )

        if command == "join":
            return JoinArgs(
                command="join",
                directory=parsed_args.directory,
                name=parsed_args.name,
                separator=ArgumentParser._validated_separator(parsed_args.separator),
            )

        if command == "probe":
            return ProbeArgs(command="probe", paths=list(parsed_args.paths))

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _validated_separator(raw: str | None) -> str | None:
        if raw is None:
            return None
        try:
            return validate_separator(raw)
        except InvalidArgumentError as e:
            logger.error("%s", e)
            sys.exit(2)
