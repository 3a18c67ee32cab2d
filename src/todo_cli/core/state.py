# src/todo_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TodoRepo


@dataclass(slots=True)
class CommandContext:
    # Settings object (real Settings or a test double with the same attributes).
    settings: object
    repo: TodoRepo
