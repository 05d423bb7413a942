# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from typing import Any

# Opaque caller identity supplied by the hosting environment.
Principal = str

PAYLOAD_FIELDS = ("title", "description", "assigned_to", "due_date")


class TaskStatus(StrEnum):
    """
    Known status values.

    The status field itself stays a plain string so callers may filter
    by arbitrary values; these are the ones the operations write.
    """

    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


@dataclass(slots=True)
class TaskPayload:
    title: str = ""
    description: str = ""
    assigned_to: str = ""
    due_date: str = ""


@dataclass(slots=True)
class Task:
    creator: Principal
    id: str
    title: str
    description: str
    created_date: int  # ns since epoch
    due_date: str
    assigned_to: str

    updated_at: int | None = None
    tags: list[str] = field(default_factory=list)
    status: str = TaskStatus.IN_PROGRESS.value
    priority: str = ""
    comments: list[str] = field(default_factory=list)

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        updated_at = data.get("updated_at")
        return cls(
            creator=str(data["creator"]),
            id=str(data["id"]),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            created_date=int(data.get("created_date") or 0),
            due_date=str(data.get("due_date") or ""),
            assigned_to=str(data.get("assigned_to") or ""),
            updated_at=int(updated_at) if updated_at is not None else None,
            tags=[str(t) for t in data.get("tags") or []],
            status=str(data.get("status") or TaskStatus.IN_PROGRESS.value),
            priority=str(data.get("priority") or ""),
            comments=[str(c) for c in data.get("comments") or []],
        )
