"""CLI argument parsing and configuration for the pin CLI."""

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, NoReturn, Optional

from . import __version__
from .errors import UsageError


class Command(Enum):
    """Sub-command selected on the command line."""

    GET_TAGS = "get-tags"
    RENAME_TAGS = "rename-tags"


@dataclass
class CLIConfig:
    """Configuration parsed from CLI arguments."""

    command: Command
    token: str
    alphabetical: bool = False
    descending: bool = False
    json_output: bool = False
    old: Optional[str] = None
    new: Optional[str] = None
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate_token()
        if self.command == Command.RENAME_TAGS:
            self._validate_rename_args()

    def _validate_token(self) -> None:
        if not self.token:
            raise ValueError("--token is required")

    def _validate_rename_args(self) -> None:
        """Validate the old and new tag names for rename-tags."""
        if not self.old:
            raise ValueError("old tag name must not be empty")
        if not self.new:
            raise ValueError("new tag name must not be empty")


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


class CLIArgumentParser:
    """Handles CLI argument parsing and validation."""

    def __init__(self) -> None:
        """Initialize the argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create and configure the argument parser."""
        parser = _RaisingArgumentParser(
            prog="pin",
            description="Manage your pinboard.in tags from the command line",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  pin --token user:ABC123 get-tags
  pin get-tags --alphabetical --descending -t user:ABC123
  pin -t user:ABC123 rename-tags pyhton python
            """.strip(),
        )
        parser.add_argument(
            "--version", action="version", version=f"%(prog)s {__version__}"
        )
        self._add_shared_arguments(parser, root=True)

        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
        subparsers.required = True

        get_tags = subparsers.add_parser(
            Command.GET_TAGS.value,
            help="Retrieve all your tags along with their use counts",
        )
        get_tags.add_argument(
            "-a", "--alphabetical", action="store_true", help="Sort alphabetically"
        )
        get_tags.add_argument(
            "-d",
            "--descending",
            action="store_true",
            help="Sort in descending order",
        )
        get_tags.add_argument(
            "--json",
            action="store_true",
            help="Output tags as a JSON array instead of a table",
        )
        self._add_shared_arguments(get_tags, root=False)

        rename_tags = subparsers.add_parser(
            Command.RENAME_TAGS.value,
            help="Rename a tag, or fold it into an existing tag",
        )
        rename_tags.add_argument("old", help="Tag to rename")
        rename_tags.add_argument("new", help="New name (may be an existing tag)")
        self._add_shared_arguments(rename_tags, root=False)

        return parser

    @staticmethod
    def _add_shared_arguments(parser: argparse.ArgumentParser, root: bool) -> None:
        """Add options accepted both before and after the sub-command."""
        # Sub-parsers use SUPPRESS so a value given before the sub-command
        # is not overwritten by their default.
        parser.add_argument(
            "-t",
            "--token",
            metavar="TOKEN",
            default=None if root else argparse.SUPPRESS,
            help="Your pinboard.in API token (required)",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            default=False if root else argparse.SUPPRESS,
            help="Log each API request to stderr",
        )

    def parse_args(self, args: Optional[List[str]] = None) -> CLIConfig:
        """Parse command line arguments into CLIConfig.

        Args:
            args: Command line arguments (defaults to sys.argv[1:])

        Returns:
            Parsed and validated configuration

        Raises:
            UsageError: On argument parsing errors or validation failures
            SystemExit: On --help or --version
        """
        if args is None:
            args = sys.argv[1:]

        parsed_args = self.parser.parse_args(args)
        try:
            return self._build_config(parsed_args)
        except ValueError as e:
            self.parser.error(str(e))

    def _build_config(self, args: argparse.Namespace) -> CLIConfig:
        """Build CLIConfig from parsed arguments."""
        command = Command(args.command)

        if command == Command.GET_TAGS:
            return CLIConfig(
                command=command,
                token=args.token,
                alphabetical=args.alphabetical,
                descending=args.descending,
                json_output=args.json,
                verbose=args.verbose,
            )

        return CLIConfig(
            command=command,
            token=args.token,
            old=args.old,
            new=args.new,
            verbose=args.verbose,
        )


def parse_cli_args(args: Optional[List[str]] = None) -> CLIConfig:
    """Parse CLI arguments and return configuration.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Parsed and validated configuration

    Raises:
        UsageError: On argument parsing errors or validation failures
    """
    parser = CLIArgumentParser()
    return parser.parse_args(args)
