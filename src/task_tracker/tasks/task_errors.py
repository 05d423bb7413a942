# src/task_tracker/tasks/task_errors.py

"""
Domain errors raised inside task operations.

They never leave the operation boundary as exceptions: task_api converts
them into Result.failure(...) so callers always inspect a value.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    NOT_FOUND = "NotFound"
    NOT_AUTHORIZED = "NotAuthorized"
    INVALID_INPUT = "InvalidInput"
    UNASSIGNED = "Unassigned"
    NOT_OVERDUE = "NotOverdue"


class TaskError(Exception):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TaskNotFound(TaskError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, task_id: str, *, suffix: str = "") -> None:
        super().__init__(f"Task with id:{task_id} not found{suffix}")
        self.task_id = task_id


class NotAuthorized(TaskError):
    kind = ErrorKind.NOT_AUTHORIZED

    def __init__(self, message: str = "You are not authorized to access Task") -> None:
        super().__init__(message)


class InvalidInput(TaskError):
    kind = ErrorKind.INVALID_INPUT


class Unassigned(TaskError):
    kind = ErrorKind.UNASSIGNED

    def __init__(self, message: str = "No one was assigned the task") -> None:
        super().__init__(message)


class NotOverdue(TaskError):
    kind = ErrorKind.NOT_OVERDUE

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task with id:{task_id} is not overdue")
        self.task_id = task_id
