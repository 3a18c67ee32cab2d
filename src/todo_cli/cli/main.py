# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Parses the command line, initializes logging, builds the CommandContext,
then runs exactly one command. Environment failures (no home directory,
unreadable/unwritable store, corrupt store under the strict policy) end
the process with EXIT_ENV_ERROR.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .. import __version__
from ..config import ConfigError, CorruptPolicy, get_settings
from ..logging_setup import level_from_name, setup_logging
from ..todos.todo_repo import StoreError
from .bootstrap import create_context
from .commands import registry

EXIT_ENV_ERROR = 2

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo-cli",
        description="A simple CLI todo application",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--store",
        type=Path,
        default=None,
        help="Store file to use instead of ~/.todo-cli.json",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of starting over when the store file is corrupt",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    registry.configure_subparsers(subparsers)
    return parser


def _apply_overrides(settings, args: argparse.Namespace):
    """Command-line flags win over env/.env for this invocation."""
    changes: dict[str, object] = {}
    if args.store is not None:
        changes["store_path"] = args.store
    if args.strict:
        changes["on_corrupt"] = CorruptPolicy.FAIL
    if not changes:
        return settings
    if dataclasses.is_dataclass(settings):
        return dataclasses.replace(settings, **changes)
    for key, value in changes.items():
        setattr(settings, key, value)
    return settings


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    args = build_parser().parse_args(argv)

    if settings is None:
        settings = get_settings()
    settings = _apply_overrides(settings, args)

    console_level = (
        logging.DEBUG
        if args.verbose
        else level_from_name(getattr(settings, "log_level", None))
    )
    log_file = getattr(settings, "log_file", None)
    try:
        setup_logging(console_level=console_level, log_file=log_file)
    except OSError as e:
        print(f"Error: Cannot open log file {log_file}: {e}", file=sys.stderr)
        return EXIT_ENV_ERROR

    try:
        ctx = create_context(settings=settings)
        return registry.handle(ctx, args)
    except (ConfigError, StoreError) as e:
        # The console gets the short message below; the log file keeps the traceback.
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ENV_ERROR


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
