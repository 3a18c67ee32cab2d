# src/todo_cli/todos/todo_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Priority(StrEnum):
    """
    Todo priority (display-only, no scheduling effect).

    The value is the stable on-disk encoding; table labels live in cli/render.py.
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def parse(cls, raw: object) -> Priority:
        """Decode a stored/typed priority. Unlike lookups by value, accepts any case."""
        if not isinstance(raw, str):
            raise ValueError(f"priority must be a string, got {type(raw).__name__}")
        try:
            return cls(raw.strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"invalid priority {raw!r}; expected one of: {valid}") from None


class ListFilter(StrEnum):
    ALL = "all"
    DONE = "done"
    PENDING = "pending"

    def matches(self, todo: Todo) -> bool:
        if self is ListFilter.DONE:
            return todo.completed
        if self is ListFilter.PENDING:
            return not todo.completed
        return True


@dataclass(slots=True)
class Todo:
    id: int
    title: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    due_date: str | None = None
    created_at: str = ""  # YYYY-MM-DD, local date
