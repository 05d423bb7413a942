# tests/fakes.py

from __future__ import annotations

from datetime import datetime, timezone

from task_tracker.core.runtime import iso_from_ns


class SequentialIds:
    """
    Deterministic IdGenerator for unit tests.

    Yields t1, t2, ... so store order is predictable (below t10).
    """

    def __init__(self, prefix: str = "t") -> None:
        self.prefix = prefix
        self.n = 0

    def new_id(self) -> str:
        self.n += 1
        return f"{self.prefix}{self.n}"


class FixedClock:
    """Clock frozen at a given UTC datetime; tick() moves it forward."""

    def __init__(self, at: datetime | None = None) -> None:
        at = at or datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        self.ns = int(at.timestamp()) * 1_000_000_000

    def tick(self, seconds: int = 1) -> None:
        self.ns += seconds * 1_000_000_000

    def now_ns(self) -> int:
        return self.ns

    def now_iso(self) -> str:
        return iso_from_ns(self.ns)
