# src/task_tracker/core/errors.py

"""
User-facing error taxonomy.

These are reported to the user as plain messages and never end the
interactive loop. Storage I/O failures are deliberately not part of this
hierarchy: an OSError from the store propagates as a fatal error.
"""

from __future__ import annotations


class TaskError(RuntimeError):
    pass


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task with id {task_id} is not found.")


class InvalidStatusError(TaskError, ValueError):
    def __init__(self, raw: object) -> None:
        self.raw = raw
        super().__init__(
            f"'{raw}' is not a valid status. Valid statuses are [in-progress, done]."
        )
