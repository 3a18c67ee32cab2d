# src/todo_cli/todos/todo_repo.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import shutil
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any

from ..config import CorruptPolicy
from .todo_models import Priority, Todo
from .todo_store import TodoStore

logger = logging.getLogger(__name__)

# Older files used "todos" for the list; we always write "tasks".
TASKS_KEY = "tasks"
LEGACY_TASKS_KEY = "todos"


class StoreError(Exception):
    """Base class for store file problems."""


class StoreReadError(StoreError):
    """The store file exists but could not be read (permissions, not a file, ...)."""


class StoreWriteError(StoreError):
    """The store file could not be written."""


class CorruptStoreError(StoreError):
    """The store file was read but its content is not a valid store."""


# ---- codec ----


def _todo_to_dict(todo: Todo) -> dict[str, Any]:
    return {
        "id": todo.id,
        "title": todo.title,
        "completed": todo.completed,
        "priority": todo.priority.value,
        "due_date": todo.due_date,
        "created_at": todo.created_at,
    }


def _require(raw: dict[str, Any], key: str, kind: type) -> Any:
    if key not in raw:
        raise ValueError(f"missing field {key!r}")
    val = raw[key]
    # bool is an int subclass; do not let true/false pass as ids.
    if not isinstance(val, kind) or (kind is int and isinstance(val, bool)):
        raise ValueError(f"field {key!r} must be {kind.__name__}")
    return val


def _todo_from_dict(raw: Any) -> Todo:
    if not isinstance(raw, dict):
        raise ValueError("todo entry must be an object")
    due = raw.get("due_date")
    if due is not None and not isinstance(due, str):
        raise ValueError("field 'due_date' must be a string or null")
    return Todo(
        id=_require(raw, "id", int),
        title=_require(raw, "title", str),
        completed=_require(raw, "completed", bool),
        priority=Priority(_require(raw, "priority", str)),  # exact lowercase literal
        due_date=due,
        created_at=_require(raw, "created_at", str),
    )


def store_to_dict(store: TodoStore) -> dict[str, Any]:
    return {
        "next_id": store.next_id,
        TASKS_KEY: [_todo_to_dict(t) for t in store.todos],
    }


def store_from_dict(
    data: Any,
    *,
    today: Callable[[], date] = date.today,
) -> TodoStore:
    """
    Build a TodoStore from decoded JSON.

    Raises ValueError on anything that is not a well-formed store.
    A next_id that would reuse an existing id is bumped past the max id.
    """
    if not isinstance(data, dict):
        raise ValueError("store must be a JSON object")

    next_id = _require(data, "next_id", int)
    raw_todos = data.get(TASKS_KEY, data.get(LEGACY_TASKS_KEY))
    if not isinstance(raw_todos, list):
        raise ValueError(f"field {TASKS_KEY!r} must be a list")

    todos = [_todo_from_dict(r) for r in raw_todos]

    seen: set[int] = set()
    for t in todos:
        if t.id in seen:
            raise ValueError(f"duplicate todo id {t.id}")
        seen.add(t.id)

    if todos:
        max_id = max(seen)
        if next_id <= max_id:
            logger.warning("Store next_id=%s not above max id=%s; repairing.", next_id, max_id)
            next_id = max_id + 1
    next_id = max(next_id, 1)

    return TodoStore(next_id=next_id, todos=todos, today=today)


# ---- file I/O ----


def load_store(
    path: str | Path,
    *,
    on_corrupt: CorruptPolicy = CorruptPolicy.RESET,
    today: Callable[[], date] = date.today,
) -> TodoStore:
    """
    Read the store file.

    - missing file -> fresh store (next_id=1, no todos)
    - unreadable file -> StoreReadError
    - undecodable content -> empty store (RESET) or CorruptStoreError (FAIL)
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.debug("Store file %s not found; starting empty.", path)
        return TodoStore(today=today)
    except OSError as e:
        raise StoreReadError(f"Failed to read store file {path}: {e}") from e

    try:
        store = store_from_dict(json.loads(raw.decode("utf-8")), today=today)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError; deep nesting recurses
        if on_corrupt is CorruptPolicy.FAIL:
            raise CorruptStoreError(f"Store file {path} is corrupt: {e}") from e
        logger.warning("Store file %s is corrupt (%s); starting with an empty store.", path, e)
        return TodoStore(today=today)

    logger.debug("Loaded store %s: %d todos, next_id=%s", path, len(store), store.next_id)
    return store


def save_store(store: TodoStore, path: str | Path, *, atomic: bool = True) -> None:
    """
    Write the whole store, replacing the file content.

    atomic=True writes a temp file next to the real target and os.replace()s
    it into place, so an interrupted save never leaves a truncated store behind.
    A symlinked store keeps its link, and an existing file keeps its mode.
    """
    path = Path(path)
    data = json.dumps(store_to_dict(store), ensure_ascii=False, indent=2) + "\n"

    try:
        if atomic:
            target = path.resolve()
            target.parent.mkdir(parents=True, exist_ok=True)
            tmp = target.with_name(target.name + ".tmp")
            try:
                tmp.write_text(data, "utf-8")
                if target.exists():
                    shutil.copymode(target, tmp)
                os.replace(tmp, target)
            except OSError:
                with contextlib.suppress(OSError):
                    tmp.unlink()
                raise
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(data, "utf-8")
    except OSError as e:
        raise StoreWriteError(f"Failed to write store file {path}: {e}") from e

    logger.debug("Saved store %s: %d todos, next_id=%s", path, len(store), store.next_id)


class JsonTodoRepo:
    """TodoRepo bound to one JSON file."""

    def __init__(
        self,
        path: str | Path,
        *,
        on_corrupt: CorruptPolicy = CorruptPolicy.RESET,
        atomic: bool = True,
    ) -> None:
        self.path = Path(path)
        self.on_corrupt = on_corrupt
        self.atomic = atomic

    def load(self) -> TodoStore:
        return load_store(self.path, on_corrupt=self.on_corrupt)

    def save(self, store: TodoStore) -> None:
        save_store(store, self.path, atomic=self.atomic)
