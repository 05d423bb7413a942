# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import sqlite3
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite-backed ordered map: task id -> Task.

    One table holds every store; rows are partitioned by (store_name, store_version)
    so a version bump starts from an empty map without touching old data.
    Values are JSON documents. values() enumerates in key order (BINARY collation,
    i.e. lexicographic on the id), never in insertion order.

    Thread-safety:
    - each method opens its own SQLite connection
    - every call touches a single key, so single-statement atomicity is enough
    """

    def __init__(
        self,
        db_path: str | Path = "tasks.sqlite3",
        *,
        store_name: str = "tasks",
        store_version: int = 0,
        max_key_size: int = 44,
    ) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._store_name = store_name
        self._store_version = int(store_version)
        self._max_key_size = int(max_key_size)
        self._ensure_schema()
        logger.info(
            "TaskStore ready db=%s store=%s v%s total=%s",
            self._db_path,
            self._store_name,
            self._store_version,
            len(self),
        )

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS task_entries (
                    store_name TEXT NOT NULL,
                    store_version INTEGER NOT NULL,
                    key TEXT NOT NULL,
                    value TEXT NOT NULL,
                    PRIMARY KEY (store_name, store_version, key)
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def _check_key(self, task_id: str) -> str:
        if not isinstance(task_id, str):
            raise TypeError(f"task id must be str, got {type(task_id).__name__}")
        if len(task_id.encode("utf-8")) > self._max_key_size:
            raise ValueError(f"task id exceeds {self._max_key_size} bytes: {task_id!r}")
        return task_id

    def _holdable(self, task_id: object) -> bool:
        """False for keys insert() would reject; such keys can only be absent."""
        if not isinstance(task_id, str):
            return False
        try:
            return len(task_id.encode("utf-8")) <= self._max_key_size
        except UnicodeEncodeError:
            return False

    @staticmethod
    def _encode(task: Task) -> str:
        return json.dumps(task.to_dict(), ensure_ascii=False)

    @staticmethod
    def _decode(raw: str) -> Task:
        return Task.from_dict(json.loads(raw))

    def _fetch(self, conn: sqlite3.Connection, task_id: str) -> Task | None:
        row = conn.execute(
            """
            SELECT value
            FROM task_entries
            WHERE store_name = ? AND store_version = ? AND key = ?
            """,
            (self._store_name, self._store_version, task_id),
        ).fetchone()
        return self._decode(row["value"]) if row else None

    # ---- public API ----

    def __len__(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute(
                "SELECT COUNT(*) FROM task_entries WHERE store_name = ? AND store_version = ?",
                (self._store_name, self._store_version),
            ).fetchone()
            return int(n)
        finally:
            conn.close()

    def contains_key(self, task_id: str) -> bool:
        return self.get(task_id) is not None

    def get(self, task_id: str) -> Task | None:
        if not self._holdable(task_id):
            return None
        conn = self._get_conn()
        try:
            return self._fetch(conn, task_id)
        finally:
            conn.close()

    def insert(self, task_id: str, task: Task) -> Task | None:
        """Insert or overwrite; returns the previous value (None if the key was new)."""
        key = self._check_key(task_id)
        conn = self._get_conn()
        try:
            previous = self._fetch(conn, key)
            conn.execute(
                """
                INSERT OR REPLACE INTO task_entries(store_name, store_version, key, value)
                VALUES (?, ?, ?, ?)
                """,
                (self._store_name, self._store_version, key, self._encode(task)),
            )
            conn.commit()
            logger.debug("Task stored id=%s overwrite=%s", key, previous is not None)
            return previous
        finally:
            conn.close()

    def remove(self, task_id: str) -> Task | None:
        """Delete the key; returns the removed value (None if it was absent)."""
        if not self._holdable(task_id):
            return None
        conn = self._get_conn()
        try:
            previous = self._fetch(conn, task_id)
            if previous is None:
                return None
            conn.execute(
                "DELETE FROM task_entries WHERE store_name = ? AND store_version = ? AND key = ?",
                (self._store_name, self._store_version, task_id),
            )
            conn.commit()
            logger.debug("Task removed id=%s", task_id)
            return previous
        finally:
            conn.close()

    def values(self) -> list[Task]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                """
                SELECT value
                FROM task_entries
                WHERE store_name = ? AND store_version = ?
                ORDER BY key ASC
                """,
                (self._store_name, self._store_version),
            ).fetchall()
            return [self._decode(r["value"]) for r in rows]
        finally:
            conn.close()
