# src/todo_cli/cli/render.py

from __future__ import annotations

from collections.abc import Iterable

from ..todos.todo_models import Priority, Todo

EMPTY_MESSAGE = "No todos found."
RULE_WIDTH = 60
ROW_FORMAT = "{:<5} {:<6} {:<8} {:<12} {}"

# Display labels are independent from the on-disk encoding (Priority.value).
PRIORITY_LABELS: dict[Priority, str] = {
    Priority.HIGH: "high",
    Priority.MEDIUM: "medium",
    Priority.LOW: "low",
}


def format_todo_row(todo: Todo) -> str:
    done = "[x]" if todo.completed else "[ ]"
    return ROW_FORMAT.format(
        todo.id,
        done,
        PRIORITY_LABELS[todo.priority],
        "-" if todo.due_date is None else todo.due_date,
        todo.title,
    )


def format_todos_table(todos: Iterable[Todo]) -> str:
    """Fixed-width table in the given order, or the empty message."""
    rows = [format_todo_row(t) for t in todos]
    if not rows:
        return EMPTY_MESSAGE
    header = ROW_FORMAT.format("ID", "Done", "Priority", "Due", "Title")
    return "\n".join([header, "-" * RULE_WIDTH, *rows])
