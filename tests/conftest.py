# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks.task_store import TaskStore

from .fakes import FixedClock, SequentialIds


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the task operations.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        store_name="tasks",
        store_version=0,
        max_key_size=44,
        initial_load_size=4,
        principal="alice",
    )


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def state(settings: SimpleNamespace, clock: FixedClock) -> AppState:
    """
    AppState wired with deterministic ids and time.

    NOTE: We keep the real SQLite TaskStore here because its ordering and
    persistence are part of what we want to test.
    """
    return AppState(
        settings=settings,
        task_store=TaskStore(settings.tasks_db_path),
        ids=SequentialIds(),
        clock=clock,
    )
