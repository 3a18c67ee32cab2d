# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- resolves the store path once per invocation,
- wires the JSON repository into a CommandContext.
"""

from __future__ import annotations

import logging

from ..config import CorruptPolicy, get_settings, resolve_store_path
from ..core.state import CommandContext
from ..todos.todo_repo import JsonTodoRepo

logger = logging.getLogger(__name__)


def create_context(*, settings=None) -> CommandContext:
    """
    Create a CommandContext from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    Raises ConfigError when the store path cannot be resolved.
    """
    if settings is None:
        settings = get_settings()

    path = resolve_store_path(settings)
    on_corrupt = CorruptPolicy(getattr(settings, "on_corrupt", CorruptPolicy.RESET))
    atomic = bool(getattr(settings, "atomic_save", True))

    logger.debug("Using store %s (on_corrupt=%s atomic=%s)", path, on_corrupt.value, atomic)
    repo = JsonTodoRepo(path, on_corrupt=on_corrupt, atomic=atomic)
    return CommandContext(settings=settings, repo=repo)
