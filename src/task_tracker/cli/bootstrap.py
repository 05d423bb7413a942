# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task store and the id/time capabilities into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.runtime import SystemClock, Uuid4Generator
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(
        settings.tasks_db_path,
        store_name=settings.store_name,
        store_version=settings.store_version,
        max_key_size=settings.max_key_size,
    )
    return AppState(
        settings=settings,
        task_store=store,
        ids=Uuid4Generator(),
        clock=SystemClock(),
    )


def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        close = getattr(state.task_store, "close", None)
        if close is not None:
            close()
    except Exception:
        logger.debug("Task store close failed.", exc_info=True)
