# tests/test_task_store.py

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from task_tracker.tasks.task_models import Task
from task_tracker.tasks.task_store import TaskStore


def _task(task_id: str, **kw) -> Task:
    base = dict(
        creator="alice",
        id=task_id,
        title=f"title {task_id}",
        description="",
        created_date=1,
        due_date="2026-01-01",
        assigned_to="bob",
    )
    base.update(kw)
    return Task(**base)


def test_insert_get_remove_return_previous_values(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3")

    assert store.get("a") is None
    assert store.insert("a", _task("a")) is None

    prev = store.insert("a", _task("a", title="renamed"))
    assert prev is not None
    assert prev.title == "title a"
    assert store.get("a").title == "renamed"

    removed = store.remove("a")
    assert removed is not None and removed.title == "renamed"
    assert store.get("a") is None
    assert store.remove("a") is None


def test_values_are_in_key_order_not_insertion_order(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3")
    for key in ["c", "a", "b"]:
        store.insert(key, _task(key))

    assert [t.id for t in store.values()] == ["a", "b", "c"]
    assert len(store) == 3
    assert store.contains_key("b")
    assert not store.contains_key("z")


def test_round_trips_all_fields_and_survives_reopen(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    task = replace(
        _task("x"),
        updated_at=42,
        tags=["urgent", "backend"],
        status="Completed",
        priority="high",
        comments=["first", "second"],
    )
    TaskStore(db).insert("x", task)

    reopened = TaskStore(db)
    assert reopened.get("x") == task


def test_store_name_and_version_partition_rows(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    v0 = TaskStore(db, store_version=0)
    v1 = TaskStore(db, store_version=1)
    other = TaskStore(db, store_name="archive")

    v0.insert("a", _task("a"))

    assert v1.values() == []
    assert other.get("a") is None
    assert len(v0) == 1


def test_insert_rejects_keys_it_cannot_hold(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3", max_key_size=8)
    with pytest.raises(ValueError):
        store.insert("x" * 9, _task("x" * 9))
    with pytest.raises(TypeError):
        store.insert(123, _task("x"))  # type: ignore[arg-type]
    assert store.values() == []


@pytest.mark.parametrize("key", ["x" * 9, 123, None, "bad\ud800"])
def test_lookups_of_unholdable_keys_are_absent(tmp_path: Path, key) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3", max_key_size=8)
    store.insert("a", _task("a"))

    assert store.get(key) is None
    assert store.remove(key) is None
    assert not store.contains_key(key)
    assert len(store) == 1
