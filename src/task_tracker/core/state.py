# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .ports import Clock, IdGenerator, TaskRepo
from .runtime import SystemClock, Uuid4Generator


@dataclass
class AppState:
    """
    Process-scoped state passed explicitly to every task operation.

    Built once by the composition root (cli/bootstrap.py); tests build it directly.
    """

    # Settings-like object (config.Settings or a SimpleNamespace in tests).
    settings: Any
    task_store: TaskRepo

    ids: IdGenerator = field(default_factory=Uuid4Generator)
    clock: Clock = field(default_factory=SystemClock)

    @property
    def initial_load_size(self) -> int:
        return int(getattr(self.settings, "initial_load_size", 4))
