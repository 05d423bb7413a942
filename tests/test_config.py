# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

from task_tracker.cli.bootstrap import create_initial_state
from task_tracker.config import Settings
from task_tracker.core.runtime import SystemClock, Uuid4Generator, iso_from_ns


def test_settings_defaults(monkeypatch) -> None:
    for name in (
        "TASKTRACK_DATA_DIR",
        "TASKTRACK_TASKS_DB_PATH",
        "TASKTRACK_INITIAL_LOAD_SIZE",
        "TASKTRACK_STORE_NAME",
        "TASKTRACK_STORE_VERSION",
        "TASKTRACK_PRINCIPAL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("USER", "carol")

    s = Settings.from_env()

    assert s.data_dir == Path(".local/tasktrack")
    assert s.tasks_db_path == Path(".local/tasktrack/tasks.sqlite3")
    assert s.initial_load_size == 4
    assert s.store_name == "tasks" and s.store_version == 0
    assert s.principal == "carol"


def test_settings_from_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKTRACK_INITIAL_LOAD_SIZE", "2")
    monkeypatch.setenv("TASKTRACK_STORE_VERSION", "not-a-number")
    monkeypatch.setenv("TASKTRACK_CONSOLE_ENABLED", "off")
    monkeypatch.setenv("TASKTRACK_PRINCIPAL", "svc-bot")

    s = Settings.from_env()

    assert s.tasks_db_path == tmp_path / "tasks.sqlite3"
    assert s.initial_load_size == 2
    assert s.store_version == 0
    assert s.console_enabled is False
    assert s.principal == "svc-bot"


def test_bootstrap_wires_store_and_capabilities(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKTRACK_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("TASKTRACK_TASKS_DB_PATH", raising=False)
    settings = Settings.from_env()

    state = create_initial_state(settings=settings)

    assert settings.tasks_db_path.exists()
    assert isinstance(state.ids, Uuid4Generator)
    assert isinstance(state.clock, SystemClock)
    assert state.task_store.values() == []


def test_iso_from_ns_matches_js_to_iso_string() -> None:
    assert iso_from_ns(0) == "1970-01-01T00:00:00.000Z"
    assert iso_from_ns(1_700_000_000_123_456_789) == "2023-11-14T22:13:20.123Z"


def test_setup_logging_writes_file_and_filters_store_chatter(tmp_path: Path) -> None:
    from task_tracker.logging_setup import _ConsoleNoiseFilter, setup_logging

    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=tmp_path)
        logging.getLogger("task_tracker.test").info("hello")
        for h in root.handlers:
            h.flush()
        assert "hello" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)

    flt = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "m", None, None)

    assert flt.filter(rec("task_tracker.tasks.task_api", logging.INFO))
    assert not flt.filter(rec("task_tracker.tasks.task_store", logging.DEBUG))
    assert not flt.filter(rec("urllib3", logging.WARNING))
