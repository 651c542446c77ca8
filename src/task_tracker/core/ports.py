# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command operations.

Operations depend on a Protocol instead of the concrete JSON store, so tests
can swap in an in-memory repository.
"""

from typing import Iterable, Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
