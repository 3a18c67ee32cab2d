# tests/conftest.py

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli.config import CorruptPolicy
from todo_cli.core.state import CommandContext

from fakes import FakeTodoRepo


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"


@pytest.fixture()
def settings(store_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap/main.

    We intentionally use a SimpleNamespace rather than reading the real env,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        log_level="WARNING",
        log_file=None,
        store_path=store_path,
        on_corrupt=CorruptPolicy.RESET,
        atomic_save=True,
    )


@pytest.fixture()
def fixed_today():
    return lambda: date(2026, 2, 20)


@pytest.fixture()
def fake_repo(fixed_today) -> FakeTodoRepo:
    return FakeTodoRepo(today=fixed_today)


@pytest.fixture()
def ctx(settings: SimpleNamespace, fake_repo: FakeTodoRepo) -> CommandContext:
    return CommandContext(settings=settings, repo=fake_repo)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """main() reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
