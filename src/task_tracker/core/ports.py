# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task operations.

The operations depend on Protocols instead of concrete implementations.
This keeps storage, id generation and time swappable and makes testing easier.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Ordered map id -> Task; values() enumerates in key order."""

    def get(self, task_id: str) -> Task | None: ...
    def insert(self, task_id: str, task: Task) -> Task | None: ...
    def remove(self, task_id: str) -> Task | None: ...
    def values(self) -> list[Task]: ...


class IdGenerator(Protocol):
    def new_id(self) -> str: ...


class Clock(Protocol):
    def now_ns(self) -> int: ...

    def now_iso(self) -> str:
        """UTC time as YYYY-MM-DDTHH:MM:SS.mmmZ (comparable with ISO due dates)."""
        ...
