# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time: every field has a local default.
- Store identity (name/version) is fixed at process start.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKTRACK"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Console ----
    console_enabled: bool
    principal: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path

    # ---- Task store identity ----
    store_name: str
    store_version: int
    max_key_size: int

    # ---- Pagination ----
    initial_load_size: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasktrack").strip() or "tasktrack"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        # The console has no login; the caller identity is whatever the environment says.
        principal = (_env(_k("PRINCIPAL"), "") or _env("USER", "anonymous")).strip() or "anonymous"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasktrack"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")

        store_name = _env(_k("STORE_NAME"), "tasks").strip() or "tasks"
        store_version = max(0, _env_int(_k("STORE_VERSION"), 0))
        max_key_size = max(1, _env_int(_k("MAX_KEY_SIZE"), 44))

        initial_load_size = max(0, _env_int(_k("INITIAL_LOAD_SIZE"), 4))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            principal=principal,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            store_name=store_name,
            store_version=store_version,
            max_key_size=max_key_size,
            initial_load_size=initial_load_size,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
