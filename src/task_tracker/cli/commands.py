# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from ..core.errors import TaskError
from ..core.ports import TaskRepo
from ..tasks.task_api import (
    add_task,
    delete_task,
    format_task,
    list_all_tasks,
    list_tasks_by_status,
    mark_task,
    update_task,
)
from ..tasks.task_models import Task

CommandHandler = Callable[[TaskRepo, list[str]], str]

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

INVALID_OPTION = "Invalid option."
NO_TASKS = "No tasks found."


class Command(IntEnum):
    EXIT = 0
    ADD = 1
    UPDATE = 2
    DELETE = 3
    MARK = 4
    LIST_ALL = 5
    LIST_BY_STATUS = 6


def coerce_int(text: str) -> int:
    """
    Lenient integer parse: leading whitespace, optional sign, digits.

    Anything without a leading integer becomes 0, so garbage typed at the
    menu prompt selects "exit".
    """
    m = _INT_PREFIX.match(text)
    return int(m.group(1)) if m else 0


@dataclass(slots=True)
class _Entry:
    handler: CommandHandler
    help_text: str
    prompts: tuple[str, ...]


class CommandRegistry:
    """Numbered-menu command registry used by connectors."""

    def __init__(self) -> None:
        self._entries: dict[Command, _Entry] = {}

    def register(
        self,
        command: Command,
        handler: CommandHandler,
        help_text: str,
        prompts: list[str] | None = None,
    ) -> None:
        self._entries[command] = _Entry(handler, help_text, tuple(prompts or ()))

    def resolve(self, option: int) -> Command | None:
        """Map a menu number to a command; None for numbers nobody handles."""
        try:
            command = Command(option)
        except ValueError:
            return None
        if command is Command.EXIT or command in self._entries:
            return command
        return None

    def prompts_for(self, command: Command) -> tuple[str, ...]:
        entry = self._entries.get(command)
        return entry.prompts if entry else ()

    def handle(self, store: TaskRepo, command: Command | int, args: list[str]) -> str | None:
        """
        Run a command with already collected arguments.

        Returns the reply text, or None for EXIT. Missing arguments count as
        empty input.
        """
        resolved = self.resolve(int(command))
        if resolved is None:
            return INVALID_OPTION
        if resolved is Command.EXIT:
            return None

        entry = self._entries[resolved]
        padded = list(args) + [""] * (len(entry.prompts) - len(args))
        try:
            return entry.handler(store, padded)
        except TaskError as e:
            logger.debug("Command %s rejected: %s", resolved.name, e)
            return str(e)

    def build_menu(self) -> str:
        lines = [f"{int(cmd)}: {entry.help_text}" for cmd, entry in sorted(self._entries.items())]
        lines.append(f"{int(Command.EXIT)}: exit")
        return "\n".join(lines)


registry = CommandRegistry()


def _render(tasks: list[Task]) -> str:
    if not tasks:
        return NO_TASKS
    return "\n\n".join(format_task(t) for t in tasks)


def cmd_add(store: TaskRepo, args: list[str]) -> str:
    task = add_task(store, args[0])
    return f"Task with id {task.id} is added successfully."


def cmd_update(store: TaskRepo, args: list[str]) -> str:
    task = update_task(store, coerce_int(args[0]), args[1])
    return f"Task with id {task.id} is updated successfully."


def cmd_delete(store: TaskRepo, args: list[str]) -> str:
    task_id = delete_task(store, coerce_int(args[0]))
    return f"Task with id {task_id} is deleted successfully."


def cmd_mark(store: TaskRepo, args: list[str]) -> str:
    status = args[1]
    task = mark_task(store, coerce_int(args[0]), status)
    return f"Task with id {task.id} marked as {status}"


def cmd_list_all(store: TaskRepo, args: list[str]) -> str:
    return _render(list_all_tasks(store))


def cmd_list_by_status(store: TaskRepo, args: list[str]) -> str:
    return _render(list_tasks_by_status(store, args[0]))


registry.register(Command.ADD, cmd_add, "Add task", prompts=["Enter task description: "])
registry.register(
    Command.UPDATE,
    cmd_update,
    "Update task",
    prompts=["Enter task ID to update: ", "Enter new task description: "],
)
registry.register(Command.DELETE, cmd_delete, "Delete task", prompts=["Enter task ID to delete: "])
registry.register(
    Command.MARK,
    cmd_mark,
    "Mark task",
    prompts=["Enter task ID to mark: ", "Enter new status (in-progress, done): "],
)
registry.register(Command.LIST_ALL, cmd_list_all, "List all tasks")
registry.register(
    Command.LIST_BY_STATUS,
    cmd_list_by_status,
    "List specific tasks",
    prompts=["Enter status to filter by (todo, in-progress or done): "],
)
