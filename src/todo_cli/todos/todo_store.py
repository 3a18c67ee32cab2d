# src/todo_cli/todos/todo_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from .todo_models import ListFilter, Priority, Todo

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TodoStore:
    """
    In-memory todo collection plus the id counter.

    - todos keep insertion order; ids are never reused (next_id only grows)
    - lookups are linear scans, task counts are small
    - persistence lives in todo_repo.py; nothing here touches the disk
    """

    next_id: int = 1
    todos: list[Todo] = field(default_factory=list)
    today: Callable[[], date] = field(default=date.today, repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.todos)

    def get(self, todo_id: int) -> Todo | None:
        for todo in self.todos:
            if todo.id == todo_id:
                return todo
        return None

    def add(
        self,
        title: str,
        priority: Priority = Priority.MEDIUM,
        due_date: str | None = None,
    ) -> int:
        todo_id = self.next_id
        self.next_id += 1
        self.todos.append(
            Todo(
                id=todo_id,
                title=title,
                completed=False,
                priority=priority,
                due_date=due_date,
                created_at=self.today().isoformat(),
            )
        )
        logger.debug("Todo added id=%s priority=%s due=%s", todo_id, priority.value, due_date)
        return todo_id

    def complete(self, todo_id: int) -> bool:
        """Mark a todo done. Idempotent; False only when the id is unknown."""
        todo = self.get(todo_id)
        if todo is None:
            return False
        todo.completed = True
        return True

    def remove(self, todo_id: int) -> bool:
        for idx, todo in enumerate(self.todos):
            if todo.id == todo_id:
                del self.todos[idx]
                logger.debug("Todo removed id=%s", todo_id)
                return True
        return False

    def filter(self, predicate: ListFilter = ListFilter.ALL) -> list[Todo]:
        """Return the matching todos themselves (not copies), in store order."""
        return [t for t in self.todos if predicate.matches(t)]
