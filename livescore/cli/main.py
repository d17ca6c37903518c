"""Livescore CLI entry point.

Usage:
    livescore list_fixtures
    livescore replay world_cup
    livescore --verbose replay my_fixture --fixtures-dir ./fixtures --json
"""

import argparse
import logging
import sys
from typing import List

from livescore.cli.commands import COMMANDS
from livescore.config import config


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(
        logging, str(config.get("LIVESCORE_LOG_LEVEL", "WARNING")).upper(), logging.WARNING
    )
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="livescore",
        description="Live scoreboard for fixtures in progress",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    for cmd in COMMANDS:
        subp = subparsers.add_parser(
            cmd.name,
            help=cmd.help or cmd.description,
            description=cmd.description or cmd.help,
            epilog=cmd.epilog,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        cmd.add_arguments(subp)
    return parser


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    _configure_logging(args.verbose)

    command = next(cmd for cmd in COMMANDS if cmd.name == args.command)
    try:
        return command.run(args)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
