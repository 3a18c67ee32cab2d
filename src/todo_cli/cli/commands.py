# src/todo_cli/cli/commands.py

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from ..core.state import CommandContext
from ..todos.todo_models import ListFilter, Priority
from .render import format_todos_table

CommandHandler = Callable[[CommandContext, argparse.Namespace], int]
ParserConfigurer = Callable[[argparse.ArgumentParser], None]

EXIT_OK = 0
EXIT_NOT_FOUND = 1

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Sub-command registry: builds the argparse sub-parsers and dispatches to handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._configure: dict[str, ParserConfigurer | None] = {}
        self._aliases: dict[str, list[str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        configure: ParserConfigurer | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._configure[key] = configure
        self._aliases[key] = [a.lower() for a in aliases]
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def names(self) -> list[str]:
        return list(self._help)

    def configure_subparsers(self, subparsers) -> None:
        for name, help_text in self._help.items():
            sub = subparsers.add_parser(name, help=help_text, aliases=self._aliases[name])
            configure = self._configure[name]
            if configure is not None:
                configure(sub)

    def handle(self, ctx: CommandContext, args: argparse.Namespace) -> int:
        name = str(getattr(args, "command", "") or "").lower()
        handler = self._handlers.get(name)
        if handler is None:
            raise KeyError(f"Unknown command: {name!r}")
        logger.debug("Dispatching command %s", name)
        return handler(ctx, args)


registry = CommandRegistry()


def _print_not_found(todo_id: int) -> int:
    print(f"Todo #{todo_id} not found.", file=sys.stderr)
    return EXIT_NOT_FOUND


# ---- add ----


def _configure_add(p: argparse.ArgumentParser) -> None:
    p.add_argument("title", help="Title of the todo")
    p.add_argument(
        "--priority",
        type=Priority.parse,
        choices=list(Priority),
        default=Priority.MEDIUM,
        help="Priority level (default: medium)",
    )
    p.add_argument("--due", default=None, help="Due date, e.g. YYYY-MM-DD")


def cmd_add(ctx: CommandContext, args: argparse.Namespace) -> int:
    store = ctx.repo.load()
    todo_id = store.add(args.title, args.priority, args.due)
    ctx.repo.save(store)
    logger.info("Added todo id=%s", todo_id)
    print(f"Added todo #{todo_id}: {args.title}")
    return EXIT_OK


# ---- list ----


def _configure_list(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--filter",
        type=str.lower,
        choices=[f.value for f in ListFilter],
        default=ListFilter.PENDING.value,
        help="Which todos to show (default: pending)",
    )


def cmd_list(ctx: CommandContext, args: argparse.Namespace) -> int:
    store = ctx.repo.load()
    todos = store.filter(ListFilter(args.filter))
    print(format_todos_table(todos))
    return EXIT_OK


# ---- done / remove ----


def _configure_id(p: argparse.ArgumentParser) -> None:
    p.add_argument("id", type=int, help="ID of the todo")


def cmd_done(ctx: CommandContext, args: argparse.Namespace) -> int:
    store = ctx.repo.load()
    if not store.complete(args.id):
        return _print_not_found(args.id)
    ctx.repo.save(store)
    logger.info("Completed todo id=%s", args.id)
    print(f"Marked todo #{args.id} as done.")
    return EXIT_OK


def cmd_remove(ctx: CommandContext, args: argparse.Namespace) -> int:
    store = ctx.repo.load()
    if not store.remove(args.id):
        return _print_not_found(args.id)
    ctx.repo.save(store)
    logger.info("Removed todo id=%s", args.id)
    print(f"Removed todo #{args.id}.")
    return EXIT_OK


registry.register("add", cmd_add, help_text="Add a new todo", configure=_configure_add)
registry.register(
    "list", cmd_list, help_text="List todos", configure=_configure_list, aliases=["ls"]
)
registry.register(
    "done",
    cmd_done,
    help_text="Mark a todo as completed",
    configure=_configure_id,
    aliases=["complete"],
)
registry.register(
    "remove", cmd_remove, help_text="Remove a todo", configure=_configure_id, aliases=["rm"]
)
