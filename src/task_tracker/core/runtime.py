# src/task_tracker/core/runtime.py

"""Default id/time capabilities wired by the composition root."""

from __future__ import annotations

import time
import uuid
from datetime import datetime, timezone


def iso_from_ns(ts_ns: int) -> str:
    secs, rem = divmod(int(ts_ns), 1_000_000_000)
    dt = datetime.fromtimestamp(secs, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{rem // 1_000_000:03d}Z"


class Uuid4Generator:
    def new_id(self) -> str:
        return str(uuid.uuid4())


class SystemClock:
    def now_ns(self) -> int:
        return time.time_ns()

    def now_iso(self) -> str:
        return iso_from_ns(self.now_ns())
