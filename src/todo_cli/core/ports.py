# src/todo_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on Protocols instead of concrete implementations.
This keeps the storage swappable and lets tests run against an in-memory repo.
"""

from typing import Protocol

from ..todos.todo_store import TodoStore


class TodoRepo(Protocol):
    """Load/save the whole todo store as one unit."""

    def load(self) -> TodoStore: ...

    def save(self, store: TodoStore) -> None: ...
