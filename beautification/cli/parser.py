"""
CLI Parser - Argument parser for the beautify command.
"""

import argparse

from .. import __version__

__all__ = ["create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="beautify",
        description="Beautify files with the best registered provider for their language",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("files", nargs="+", metavar="FILE", help="Files to beautify")

    parser.add_argument(
        "-p", "--provider",
        dest="providers",
        action="append",
        default=[],
        metavar="MODULE:ATTR",
        help="Provider entry point (repeatable, tried in priority order); "
             "defaults to BEAUTIFY_PROVIDERS",
    )
    parser.add_argument(
        "-l", "--language",
        default=None,
        help="Language id to use instead of guessing from the file extension",
    )
    parser.add_argument(
        "--priority",
        type=int,
        default=None,
        help="Override the priority every provider declares",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds a single provider may take (default: BEAUTIFY_PROVIDER_TIMEOUT)",
    )

    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--stdout",
        action="store_true",
        help="Print the result instead of writing the file",
    )
    output.add_argument(
        "--check",
        action="store_true",
        help="Exit with 1 if any file would change; write nothing",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log provider decisions to stderr",
    )

    return parser
