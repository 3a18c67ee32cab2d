# src/todo_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per invocation (normal "settings layer").
- Nothing touches the filesystem or the home directory at import time.
- Every value can be overridden from the environment with the TODO_CLI_ prefix.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "TODO_CLI"
STORE_FILE_NAME = ".todo-cli.json"


class ConfigError(RuntimeError):
    """Raised when the environment cannot provide a required setting."""


class CorruptPolicy(StrEnum):
    """
    What to do when the store file exists but cannot be decoded.

    RESET keeps the historical behavior (start over with an empty store),
    FAIL aborts the command and leaves the file alone.
    """

    RESET = "reset"
    FAIL = "fail"

    @classmethod
    def parse(cls, raw: str | None) -> CorruptPolicy:
        if not raw or not raw.strip():
            return cls.RESET
        try:
            return cls(raw.strip().lower())
        except ValueError:
            logger.warning("Unknown corrupt-file policy %r; using %s.", raw, cls.RESET.value)
            return cls.RESET


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv() -> None:
    # Real environment variables always win over the .env file.
    load_dotenv(find_dotenv(usecwd=True), override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Logging ----
    log_level: str
    log_file: Path | None

    # ---- Store ----
    store_path: Path | None  # None => <home>/.todo-cli.json
    on_corrupt: CorruptPolicy
    atomic_save: bool

    @staticmethod
    def from_env() -> "Settings":
        _load_dotenv()
        return Settings(
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_file=_env_path(_k("LOG_FILE")),
            store_path=_env_path(_k("STORE_PATH")),
            on_corrupt=CorruptPolicy.parse(os.getenv(_k("ON_CORRUPT"))),
            atomic_save=_env_bool(_k("ATOMIC_SAVE"), True),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def resolve_store_path(settings) -> Path:
    """
    Return the store file for this invocation.

    An explicit settings.store_path wins; otherwise the file lives in the
    user's home directory. Failing to find a home directory is fatal.
    """
    explicit = getattr(settings, "store_path", None)
    if explicit:
        return Path(explicit).expanduser()
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigError("Cannot resolve the home directory (is HOME set?)") from e
    return home / STORE_FILE_NAME
