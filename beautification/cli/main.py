"""
CLI Main - Entry point for the `beautify` command.

Usage:
    beautify [-p MODULE:ATTR]... [-l LANG] [--priority N] [--timeout S]
             [--stdout | --check] [-v] FILE...

Exit codes:
    0   Success, or no provider had anything to do
    1   --check found files to change, or an error occurred
    2   Usage error (bad arguments, no providers)
"""

import asyncio
import dataclasses
import sys
from pathlib import Path

import structlog

from ..config import BeautificationConfig
from ..contracts import BeautificationError, ProviderLoadError
from ..editor import TextEditor
from ..loader import register_entry_points
from ..log import configure_logging
from ..manager import BeautificationManager
from .parser import create_parser

__all__ = ["main", "print_error"]

logger = structlog.get_logger(__name__)


def print_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


def main(args: list[str] | None = None) -> int:
    """Main entry point for the beautify CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    if args is None:
        args = sys.argv[1:]

    parser = create_parser()
    parsed = parser.parse_args(args)

    config = BeautificationConfig()
    if parsed.timeout is not None:
        config = dataclasses.replace(config, provider_timeout=parsed.timeout)

    configure_logging("DEBUG" if parsed.verbose else config.log_level, json=config.log_json)

    entry_points = parsed.providers or list(config.providers)
    if not entry_points:
        print_error("No providers given; use --provider or set BEAUTIFY_PROVIDERS")
        return 2

    manager = BeautificationManager(config)
    try:
        register_entry_points(manager.registry, entry_points, priority=parsed.priority)
    except ProviderLoadError as e:
        print_error(str(e))
        return 1

    try:
        return asyncio.run(_run(manager, parsed))
    except KeyboardInterrupt:
        return 130


async def _run(manager: BeautificationManager, parsed) -> int:
    """Beautify every file; returns the exit code."""
    exit_code = 0

    for name in parsed.files:
        path = Path(name)
        try:
            editor = TextEditor.from_file(path, language_id=parsed.language)
        except (OSError, UnicodeDecodeError) as e:
            print_error(f"{path}: {e}")
            exit_code = 1
            continue

        original = editor.text
        try:
            await manager.beautify(editor)
        except BeautificationError as e:
            print_error(f"{path}: {e}")
            exit_code = 1
            continue

        changed = editor.text != original
        logger.debug("file_processed", path=str(path), changed=changed)

        if parsed.stdout:
            sys.stdout.write(editor.text)
        elif parsed.check:
            if changed:
                print(f"would beautify {path}")
                exit_code = 1
        elif changed:
            editor.save()
            print(f"beautified {path}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
