# src/task_tracker/core/result.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from ..tasks.task_errors import ErrorKind, TaskError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """
    Two-variant outcome of a task operation.

    Exactly one of value/error is meaningful; check `ok` before using `value`.
    """

    value: T | None = None
    error: TaskError | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: TaskError) -> Result[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error is not None else None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
