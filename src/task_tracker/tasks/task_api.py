# src/task_tracker/tasks/task_api.py

"""
Task operations.

Every public operation takes the AppState explicitly (store, id generator,
clock, settings) and returns a Result. Domain failures are raised as
TaskError inside the operation and converted to Result.failure(...) at the
boundary by @_operation, so nothing but store/IO errors escapes as an exception.

Filters, search and pagination scan state.task_store.values() (key order).
"""

from __future__ import annotations

import functools
import logging
import operator
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any, TypeVar

from ..core.result import Result
from ..core.state import AppState
from .task_errors import InvalidInput, NotAuthorized, NotOverdue, TaskError, TaskNotFound, Unassigned
from .task_models import PAYLOAD_FIELDS, Principal, Task, TaskPayload, TaskStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _operation(func: Callable[..., T]) -> Callable[..., Result[T]]:
    @functools.wraps(func)
    def wrapper(state: AppState, *args: Any, **kwargs: Any) -> Result[T]:
        try:
            return Result.success(func(state, *args, **kwargs))
        except TaskError as e:
            logger.info("%s rejected (%s): %s", func.__name__, e.kind, e.message)
            return Result.failure(e)

    return wrapper


# ---- helpers ----


def _require(state: AppState, task_id: str, *, suffix: str = "") -> Task:
    task = state.task_store.get(task_id)
    if task is None:
        raise TaskNotFound(task_id, suffix=suffix)
    return task


def _require_owner(task: Task, caller: Principal) -> None:
    if str(task.creator) != str(caller):
        raise NotAuthorized()


def _save(state: AppState, task: Task, **changes: Any) -> Task:
    """Replace the whole record under its unchanged id, stamping updated_at."""
    updated = replace(task, updated_at=state.clock.now_ns(), **changes)
    state.task_store.insert(updated.id, updated)
    return updated


def _coerce_payload(payload: TaskPayload | Mapping[str, Any]) -> dict[str, str]:
    """Return only the payload fields the caller actually provided."""
    if isinstance(payload, TaskPayload):
        return {k: getattr(payload, k) for k in PAYLOAD_FIELDS}
    if isinstance(payload, Mapping):
        return {k: str(payload[k] or "") for k in PAYLOAD_FIELDS if k in payload}
    raise InvalidInput("Missing or invalid input data")


def _as_int(value: Any, name: str) -> int:
    """Exact integers only: an int, or a decimal string as the console passes. Floats are rejected."""
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            raise InvalidInput(f"{name} must be an integer") from None
    if isinstance(value, bool):
        raise InvalidInput(f"{name} must be an integer")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidInput(f"{name} must be an integer") from None


def _is_overdue(task: Task, now_iso: str) -> bool:
    # Plain string comparison: only meaningful when due_date is ISO 8601 like now_iso.
    return task.due_date < now_iso and not task.is_completed


# ---- queries ----


@_operation
def get_initial_tasks(state: AppState) -> list[Task]:
    return state.task_store.values()[: state.initial_load_size]


@_operation
def load_more_tasks(state: AppState, offset: int, limit: int) -> list[Task]:
    offset, limit = _as_int(offset, "offset"), _as_int(limit, "limit")
    if offset < 0 or limit < 0:
        raise InvalidInput("offset and limit must be non-negative")
    return state.task_store.values()[offset : offset + limit]


@_operation
def get_task(state: AppState, task_id: str, caller: Principal) -> Task:
    task = _require(state, task_id)
    _require_owner(task, caller)
    return task


@_operation
def get_task_by_tags(state: AppState, tag: str) -> list[Task]:
    return [t for t in state.task_store.values() if tag in t.tags]


@_operation
def search_tasks(state: AppState, query: str) -> list[Task]:
    needle = (query or "").lower()
    return [
        t
        for t in state.task_store.values()
        if needle in t.title.lower() or needle in t.description.lower()
    ]


@_operation
def get_tasks_by_status(state: AppState, status: str) -> list[Task]:
    return [t for t in state.task_store.values() if t.status == status]


@_operation
def get_tasks_by_creator(state: AppState, creator: Principal) -> list[Task]:
    return [t for t in state.task_store.values() if str(t.creator) == str(creator)]


@_operation
def get_overdue_tasks(state: AppState) -> list[Task]:
    now_iso = state.clock.now_iso()
    return [t for t in state.task_store.values() if _is_overdue(t, now_iso)]


@_operation
def send_due_date_reminder(state: AppState, task_id: str) -> str:
    """
    Advisory text for an overdue task.

    No ownership check: anyone who knows the id may ask.
    """
    task = _require(state, task_id)
    if not _is_overdue(task, state.clock.now_iso()):
        raise NotOverdue(task_id)
    who = f" (assigned to {task.assigned_to})" if task.assigned_to else ""
    return f"Reminder: task '{task.title}'{who} was due {task.due_date} and is still {task.status}."


# ---- updates ----


@_operation
def add_task(state: AppState, payload: TaskPayload | Mapping[str, Any], caller: Principal) -> Task:
    fields = _coerce_payload(payload)
    if not all(fields.get(k) for k in PAYLOAD_FIELDS):
        raise InvalidInput("Missing or invalid input data")

    task = Task(
        creator=caller,
        id=state.ids.new_id(),
        created_date=state.clock.now_ns(),
        updated_at=None,
        tags=[],
        status=TaskStatus.IN_PROGRESS.value,
        priority="",
        comments=[],
        **fields,
    )
    if state.task_store.get(task.id) is not None:
        raise RuntimeError(f"id generator produced a duplicate id: {task.id}")
    state.task_store.insert(task.id, task)
    logger.info("Task added id=%s creator=%s due=%s", task.id, caller, task.due_date)
    return task


@_operation
def add_tags(state: AppState, task_id: str, tags: Sequence[str], caller: Principal) -> Task:
    if isinstance(tags, str) or not tags:
        raise InvalidInput("Invalid tags")
    task = _require(state, task_id)
    _require_owner(task, caller)
    updated = _save(state, task, tags=[*task.tags, *(str(t) for t in tags)])
    logger.info("Tags added id=%s tags=%s", task_id, list(tags))
    return updated


@_operation
def update_task(
    state: AppState,
    task_id: str,
    payload: TaskPayload | Mapping[str, Any],
    caller: Principal,
) -> Task:
    task = _require(state, task_id)
    _require_owner(task, caller)
    updated = _save(state, task, **_coerce_payload(payload))
    logger.info("Task updated id=%s", task_id)
    return updated


@_operation
def completed_task(state: AppState, task_id: str) -> Task:
    task = _require(state, task_id)
    if not task.assigned_to:
        raise Unassigned()
    updated = _save(state, task, status=TaskStatus.COMPLETED.value)
    logger.info("Task completed id=%s assignee=%s", task_id, task.assigned_to)
    return updated


@_operation
def set_task_priority(state: AppState, task_id: str, priority: str, caller: Principal) -> Task:
    task = _require(state, task_id)
    _require_owner(task, caller)
    updated = _save(state, task, priority=str(priority))
    logger.info("Task priority set id=%s priority=%s", task_id, priority)
    return updated


@_operation
def delete_task(state: AppState, task_id: str, caller: Principal) -> Task:
    task = _require(state, task_id, suffix=", could not be deleted")
    _require_owner(task, caller)
    state.task_store.remove(task_id)
    logger.info("Task deleted id=%s", task_id)
    return task


@_operation
def add_task_comment(state: AppState, task_id: str, comment: str) -> Task:
    """Append one comment. No ownership check: any caller may comment."""
    task = _require(state, task_id)
    updated = _save(state, task, comments=[*task.comments, str(comment)])
    logger.info("Comment added id=%s total=%d", task_id, len(updated.comments))
    return updated


# ---- dispatch by name ----


class OperationKind(StrEnum):
    QUERY = "query"
    UPDATE = "update"


@dataclass(frozen=True, slots=True)
class Operation:
    name: str
    kind: OperationKind
    handler: Callable[..., Result[Any]]
    needs_caller: bool = False


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation("getInitialTasks", OperationKind.QUERY, get_initial_tasks),
        Operation("loadMoreTasks", OperationKind.QUERY, load_more_tasks),
        Operation("getTask", OperationKind.QUERY, get_task, needs_caller=True),
        Operation("getTaskByTags", OperationKind.QUERY, get_task_by_tags),
        Operation("searchTasks", OperationKind.QUERY, search_tasks),
        Operation("getTasksByStatus", OperationKind.QUERY, get_tasks_by_status),
        Operation("getTasksByCreator", OperationKind.QUERY, get_tasks_by_creator),
        Operation("getOverdueTasks", OperationKind.QUERY, get_overdue_tasks),
        Operation("sendDueDateReminder", OperationKind.QUERY, send_due_date_reminder),
        Operation("addTask", OperationKind.UPDATE, add_task, needs_caller=True),
        Operation("addTags", OperationKind.UPDATE, add_tags, needs_caller=True),
        Operation("updateTask", OperationKind.UPDATE, update_task, needs_caller=True),
        Operation("completedTask", OperationKind.UPDATE, completed_task),
        Operation("setTaskPriority", OperationKind.UPDATE, set_task_priority, needs_caller=True),
        Operation("deleteTask", OperationKind.UPDATE, delete_task, needs_caller=True),
        Operation("addTaskComment", OperationKind.UPDATE, add_task_comment),
    )
}


def invoke(state: AppState, name: str, *args: Any, caller: Principal | None = None) -> Result[Any]:
    """
    Call an operation by its canonical name with positional arguments.

    The caller principal is appended for operations that check ownership.
    Unknown names raise KeyError.
    """
    op = OPERATIONS[name]
    if op.needs_caller:
        if caller is None:
            raise ValueError(f"{name} requires a caller principal")
        return op.handler(state, *args, caller)
    return op.handler(state, *args)
