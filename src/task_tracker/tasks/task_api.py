# src/task_tracker/tasks/task_api.py

"""
Task command operations.

Every operation loads the full store, works on the in-memory list and saves
it back when something changed. Errors that the user should see are raised
as TaskError subclasses; the command layer turns them into messages.
"""

from __future__ import annotations

import logging

from ..core.errors import TaskNotFoundError
from ..core.ports import TaskRepo
from .task_models import Task, parse_mark_target

logger = logging.getLogger(__name__)


def _next_id(tasks: list[Task]) -> int:
    if not tasks:
        return 1
    return max(t.id for t in tasks) + 1


def _find(tasks: list[Task], task_id: int) -> Task:
    for task in tasks:
        if task.id == task_id:
            return task
    raise TaskNotFoundError(task_id)


def add_task(store: TaskRepo, description: str) -> Task:
    tasks = store.load()
    task = Task(id=_next_id(tasks), description=description)
    tasks.append(task)
    store.save(tasks)
    logger.info("Task added id=%s", task.id)
    return task


def update_task(store: TaskRepo, task_id: int, description: str) -> Task:
    tasks = store.load()
    task = _find(tasks, task_id)
    task.update_description(description)
    store.save(tasks)
    logger.info("Task updated id=%s", task_id)
    return task


def delete_task(store: TaskRepo, task_id: int) -> int:
    tasks = store.load()
    remaining = [t for t in tasks if t.id != task_id]
    if len(remaining) == len(tasks):
        raise TaskNotFoundError(task_id)
    store.save(remaining)
    logger.info("Task deleted id=%s", task_id)
    return task_id


def mark_task(store: TaskRepo, task_id: int, status: str) -> Task:
    """
    Move a task to "in-progress" or "done".

    The task is looked up first, so an unknown id wins over an invalid
    status. "todo" is never accepted here.
    """
    tasks = store.load()
    task = _find(tasks, task_id)
    target = parse_mark_target(status)
    task.update_status(target)
    store.save(tasks)
    logger.info("Task marked id=%s status=%s", task_id, target.value)
    return task


def list_all_tasks(store: TaskRepo) -> list[Task]:
    return store.load()


def list_tasks_by_status(store: TaskRepo, status: str) -> list[Task]:
    """Exact match on the stored status value; unknown values just match nothing."""
    return [t for t in store.load() if t.status.value == status]


def format_task(task: Task) -> str:
    return (
        f"Task ID: {task.id}\n"
        f"Description: {task.description}\n"
        f"Status: {task.status.value}\n"
        f"Created At: {task.created_at}\n"
        f"Updated At: {task.updated_at}"
    )
