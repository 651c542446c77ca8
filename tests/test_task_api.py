# tests/test_task_api.py

from __future__ import annotations

import json

import pytest

from task_tracker.core.errors import InvalidStatusError, TaskNotFoundError
from task_tracker.tasks.task_api import (
    add_task,
    delete_task,
    format_task,
    list_all_tasks,
    list_tasks_by_status,
    mark_task,
    update_task,
)
from task_tracker.tasks.task_models import Task, TaskStatus


def test_example_session_against_json_store(store, clock) -> None:
    first = add_task(store, "buy milk")
    assert (first.id, first.status) == (1, TaskStatus.TODO)

    assert add_task(store, "write report").id == 2

    delete_task(store, 1)
    assert [t.id for t in list_all_tasks(store)] == [2]

    marked = mark_task(store, 2, "done")
    assert marked.status is TaskStatus.DONE

    assert [t.id for t in list_tasks_by_status(store, "done")] == [2]
    assert list_tasks_by_status(store, "todo") == []

    on_disk = json.loads(store.path.read_text("utf-8"))
    assert [(r["id"], r["status"]) for r in on_disk] == [(2, "done")]


def test_deleting_highest_id_lets_it_be_reused(repo, clock) -> None:
    ids = [add_task(repo, f"t{i}").id for i in range(3)]
    delete_task(repo, 2)
    ids.append(add_task(repo, "t3").id)
    delete_task(repo, 4)
    delete_task(repo, 3)
    ids.append(add_task(repo, "t4").id)

    assert ids == [1, 2, 3, 4, 2]
    assert [t.id for t in repo.tasks] == [1, 2]


def test_ids_strictly_increase_while_max_survives(repo, clock) -> None:
    ids = [add_task(repo, "a").id, add_task(repo, "b").id]
    delete_task(repo, 1)
    ids.append(add_task(repo, "c").id)
    delete_task(repo, 2)
    ids.append(add_task(repo, "d").id)

    assert ids == sorted(set(ids))
    assert ids == [1, 2, 3, 4]


def test_add_appends_at_end(repo, clock) -> None:
    repo.tasks = [
        Task(id=5, description="five"),
        Task(id=2, description="two"),
    ]
    task = add_task(repo, "six")

    assert task.id == 6
    assert [t.id for t in repo.tasks] == [5, 2, 6]
    assert repo.saves == 1


def test_update_changes_description(repo, clock) -> None:
    add_task(repo, "draft")
    before = repo.tasks[0].updated_at

    update_task(repo, 1, "final")

    assert repo.tasks[0].description == "final"
    assert repo.tasks[0].updated_at > before
    assert repo.saves == 2


def test_update_unknown_id_does_not_save(repo, clock) -> None:
    add_task(repo, "x")
    with pytest.raises(TaskNotFoundError) as exc:
        update_task(repo, 9, "y")

    assert exc.value.task_id == 9
    assert str(exc.value) == "Task with id 9 is not found."
    assert repo.saves == 1


def test_delete_unknown_id_leaves_store_unchanged(repo, clock) -> None:
    add_task(repo, "x")
    snapshot = [t.to_record() for t in repo.tasks]

    with pytest.raises(TaskNotFoundError):
        delete_task(repo, 42)

    assert [t.to_record() for t in repo.tasks] == snapshot
    assert repo.saves == 1


def test_delete_preserves_relative_order(repo, clock) -> None:
    for name in ("a", "b", "c", "d"):
        add_task(repo, name)
    delete_task(repo, 2)

    assert [t.description for t in repo.tasks] == ["a", "c", "d"]


@pytest.mark.parametrize("start", ["todo", "in-progress", "done"])
def test_mark_todo_always_fails(repo, clock, start) -> None:
    repo.tasks = [Task(id=1, description="x", status=start)]

    with pytest.raises(InvalidStatusError):
        mark_task(repo, 1, "todo")

    assert repo.tasks[0].status == start
    assert repo.saves == 0


def test_mark_rejects_unknown_status(repo, clock) -> None:
    add_task(repo, "x")
    with pytest.raises(InvalidStatusError):
        mark_task(repo, 1, "finished")
    assert repo.saves == 1


def test_mark_unknown_id_wins_over_invalid_status(repo, clock) -> None:
    with pytest.raises(TaskNotFoundError):
        mark_task(repo, 3, "todo")


def test_mark_in_progress_then_done(repo, clock) -> None:
    add_task(repo, "x")
    created = repo.tasks[0].updated_at

    mark_task(repo, 1, "in-progress")
    after_progress = repo.tasks[0].updated_at
    mark_task(repo, 1, "done")
    after_done = repo.tasks[0].updated_at

    assert repo.tasks[0].status is TaskStatus.DONE
    assert created < after_progress < after_done
    assert repo.tasks[0].created_at <= after_done


def test_list_by_status_has_no_validation(repo, clock) -> None:
    add_task(repo, "x")
    assert list_tasks_by_status(repo, "whatever") == []
    assert list_tasks_by_status(repo, "Todo") == []
    assert [t.id for t in list_tasks_by_status(repo, "todo")] == [1]
    assert repo.saves == 1


def test_list_keeps_load_order(repo, clock) -> None:
    repo.tasks = [Task(id=3, description="c"), Task(id=1, description="a")]
    assert [t.id for t in list_all_tasks(repo)] == [3, 1]


def test_format_task(clock) -> None:
    task = Task(id=4, description="walk dog", status="in-progress")

    assert format_task(task).splitlines() == [
        "Task ID: 4",
        "Description: walk dog",
        "Status: in-progress",
        "Created At: 2024-01-01 09:00:00",
        "Updated At: 2024-01-01 09:00:00",
    ]


def test_mark_rejects_padded_status(repo, clock) -> None:
    add_task(repo, "x")

    with pytest.raises(InvalidStatusError):
        mark_task(repo, 1, " done ")

    assert repo.tasks[0].status is TaskStatus.TODO
    assert repo.saves == 1
