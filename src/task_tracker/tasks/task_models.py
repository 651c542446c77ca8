# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from ..core.errors import InvalidStatusError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

RECORD_FIELDS = ("id", "description", "status", "created_at", "updated_at")


def timestamp_now() -> str:
    """Local wall-clock time; the format sorts lexicographically in time order."""
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - every task starts as "todo";
    - only "in-progress" and "done" can be set through the mark command,
      so a task never goes back to "todo".
    """

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | TaskStatus) -> TaskStatus:
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise InvalidStatusError(raw)
        try:
            return cls(raw)
        except ValueError:
            raise InvalidStatusError(raw) from None

    @classmethod
    def markable(cls) -> frozenset[TaskStatus]:
        return frozenset({cls.IN_PROGRESS, cls.DONE})


def parse_mark_target(raw: str | TaskStatus) -> TaskStatus:
    """Parse a status the user wants to mark a task with ("todo" is rejected)."""
    status = TaskStatus.parse(raw)
    if status not in TaskStatus.markable():
        raise InvalidStatusError(raw)
    return status


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus = TaskStatus.TODO
    created_at: str | None = None
    updated_at: str | None = None

    def __post_init__(self) -> None:
        self.status = TaskStatus.parse(self.status)
        if self.created_at is None or self.updated_at is None:
            now = timestamp_now()
            if self.created_at is None:
                self.created_at = now
            if self.updated_at is None:
                self.updated_at = now

    def update_description(self, description: str) -> None:
        self.description = description
        self.updated_at = timestamp_now()

    def update_status(self, status: str | TaskStatus) -> None:
        self.status = TaskStatus.parse(status)
        self.updated_at = timestamp_now()

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Task:
        """
        Build a Task from a stored record.

        Raises KeyError/TypeError/ValueError (InvalidStatusError included)
        when the record is malformed.
        """
        if not isinstance(record, dict):
            raise TypeError(f"task record must be an object, got {type(record).__name__}")

        task_id = record["id"]
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise TypeError(f"task id must be an integer, got {task_id!r}")

        for name in ("description", "created_at", "updated_at"):
            if not isinstance(record[name], str):
                raise TypeError(f"task field {name!r} must be a string")

        return cls(
            id=task_id,
            description=record["description"],
            status=TaskStatus.parse(record["status"]),
            created_at=record["created_at"],
            updated_at=record["updated_at"],
        )
