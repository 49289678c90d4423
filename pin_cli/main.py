"""Main entry point for the pin CLI."""

import logging
import sys
from typing import List

from .cli import CLIConfig, Command, parse_cli_args
from .client import PinboardClient
from .errors import PinError
from .output import format_json, format_table
from .tags import sort_tags

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def get_tags(config: CLIConfig) -> None:
    """Print every tag with its use count."""
    with PinboardClient(config.token) as client:
        tags = client.get_tags()

    tags = sort_tags(
        tags, alphabetical=config.alphabetical, descending=config.descending
    )
    logger.debug("Fetched %d tags", len(tags))

    if config.json_output:
        print(format_json(tags))
    else:
        print(format_table(tags))


def rename_tags(config: CLIConfig) -> None:
    """Rename a tag and print the service's response body."""
    with PinboardClient(config.token) as client:
        body = client.rename_tag(config.old, config.new)

    sys.stdout.write(body if body.endswith("\n") else body + "\n")


COMMANDS = {
    Command.GET_TAGS: get_tags,
    Command.RENAME_TAGS: rename_tags,
}


def main(args: List[str] = None) -> int:
    """Main entry point for the pin CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=any failure)
    """
    try:
        config = parse_cli_args(args)
        configure_logging(config.verbose)
        COMMANDS[config.command](config)
    except PinError as e:
        print(e)
        return 1

    return 0


def cli_entry_point() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry_point()
