# src/task_tracker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

_STORE_LOGGER = "task_tracker.tasks.task_store"


class _ConsoleNoiseFilter(logging.Filter):
    """Console shows our own logs (store writes only at WARNING+) and foreign logs at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == _STORE_LOGGER:
            return record.levelno >= logging.WARNING
        if record.name.startswith("task_tracker."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/tasktrack",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """Install a filtered stderr handler and a full log file; returns the file path."""
    log_file = Path(log_dir) / "tasktrack.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
