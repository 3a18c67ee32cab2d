# tests/test_main.py

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from todo_cli.cli.main import EXIT_ENV_ERROR, main
from todo_cli.config import CorruptPolicy


def _saved(path: Path) -> dict:
    return json.loads(path.read_text("utf-8"))


def test_full_session(settings, store_path: Path, capsys) -> None:
    assert main(["add", "Buy milk", "--priority", "high", "--due", "2026-03-01"], settings=settings) == 0
    assert main(["add", "Call mom"], settings=settings) == 0
    assert capsys.readouterr().out == "Added todo #1: Buy milk\nAdded todo #2: Call mom\n"

    data = _saved(store_path)
    assert data["next_id"] == 3
    assert data["tasks"][0]["priority"] == "high"
    assert data["tasks"][0]["created_at"] == date.today().isoformat()
    assert data["tasks"][1]["due_date"] is None

    assert main(["done", "2"], settings=settings) == 0
    assert capsys.readouterr().out == "Marked todo #2 as done.\n"

    assert main(["list"], settings=settings) == 0
    rows = capsys.readouterr().out.splitlines()
    assert rows[0].startswith("ID")
    assert [r.split()[0] for r in rows[2:]] == ["1"]

    assert main(["list", "--filter", "done"], settings=settings) == 0
    rows = capsys.readouterr().out.splitlines()
    assert [r.split()[0] for r in rows[2:]] == ["2"]
    assert "[x]" in rows[2]

    assert main(["remove", "1"], settings=settings) == 0
    assert capsys.readouterr().out == "Removed todo #1.\n"

    assert main(["list"], settings=settings) == 0
    assert capsys.readouterr().out == "No todos found.\n"

    # ids are never reused
    assert main(["add", "Later"], settings=settings) == 0
    assert capsys.readouterr().out == "Added todo #3: Later\n"


@pytest.mark.parametrize("command", ["done", "remove"])
def test_missing_id_exits_1_and_leaves_file_untouched(settings, store_path: Path, capsys, command) -> None:
    main(["add", "only"], settings=settings)
    before = store_path.read_bytes()
    capsys.readouterr()

    assert main([command, "99"], settings=settings) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip().endswith("Todo #99 not found.")
    assert store_path.read_bytes() == before


def test_list_on_first_run_does_not_create_file(settings, store_path: Path, capsys) -> None:
    assert main(["list", "--filter", "all"], settings=settings) == 0
    assert capsys.readouterr().out == "No todos found.\n"
    assert not store_path.exists()


def test_corrupt_store_resets_by_default(settings, store_path: Path, capsys) -> None:
    store_path.write_text("{not json", "utf-8")

    assert main(["list"], settings=settings) == 0
    assert capsys.readouterr().out == "No todos found.\n"
    assert store_path.read_text("utf-8") == "{not json"

    assert main(["add", "fresh"], settings=settings) == 0
    assert _saved(store_path)["tasks"][0]["id"] == 1


def test_corrupt_store_with_strict_flag_is_fatal(settings, store_path: Path, capsys) -> None:
    store_path.write_text("{not json", "utf-8")

    assert main(["--strict", "add", "x"], settings=settings) == EXIT_ENV_ERROR

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error:" in captured.err
    assert store_path.read_text("utf-8") == "{not json"


def test_corrupt_policy_from_settings(settings, store_path: Path) -> None:
    settings.on_corrupt = CorruptPolicy.FAIL
    store_path.write_text("[]", "utf-8")
    assert main(["list"], settings=settings) == EXIT_ENV_ERROR


def test_unwritable_store_is_fatal(settings, tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")
    settings.store_path = blocker / "todos.json"

    assert main(["add", "x"], settings=settings) == EXIT_ENV_ERROR
    assert "Error:" in capsys.readouterr().err


def test_store_flag_overrides_settings(settings, store_path: Path, tmp_path: Path, capsys) -> None:
    other = tmp_path / "other.json"

    assert main(["--store", str(other), "add", "elsewhere"], settings=settings) == 0
    assert other.exists()
    assert not store_path.exists()


def test_default_store_lives_in_home(settings, monkeypatch, tmp_path: Path, capsys) -> None:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    settings.store_path = None

    assert main(["add", "at home"], settings=settings) == 0
    assert _saved(home / ".todo-cli.json")["tasks"][0]["title"] == "at home"


def test_unresolvable_home_is_fatal(settings, monkeypatch, capsys) -> None:
    def _no_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", _no_home)
    settings.store_path = None

    assert main(["list"], settings=settings) == EXIT_ENV_ERROR
    assert "home directory" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["add"],
        ["add", "x", "--priority", "urgent"],
        ["list", "--filter", "someday"],
        ["done", "abc"],
        ["frobnicate"],
    ],
)
def test_usage_errors_exit_2(settings, argv, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(argv, settings=settings)
    assert exc.value.code == 2


def test_priority_and_filter_are_case_insensitive(settings, store_path: Path, capsys) -> None:
    assert main(["add", "x", "--priority", "LOW"], settings=settings) == 0
    assert _saved(store_path)["tasks"][0]["priority"] == "low"
    assert main(["list", "--filter", "ALL"], settings=settings) == 0


def test_deeply_nested_store_resets_instead_of_crashing(settings, store_path: Path, capsys) -> None:
    store_path.write_text("[" * 100_000, "utf-8")

    assert main(["list"], settings=settings) == 0
    assert capsys.readouterr().out == "No todos found.\n"


def test_unwritable_log_file_is_fatal(settings, tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")
    settings.log_file = blocker / "logs" / "todo.log"

    assert main(["list"], settings=settings) == EXIT_ENV_ERROR
    assert capsys.readouterr().err.startswith("Error: Cannot open log file")
