# tests/test_task_service.py

from __future__ import annotations

import pytest

from taskboard.application import task_service
from taskboard.application.task_service import ErrorKind
from taskboard.domain.shared import Err, Ok
from taskboard.infrastructure.storage import InMemoryTaskRepository

from .factories import make_task

VALID = {
    "title": "Write docs",
    "priority": "medium",
    "status": "todo",
    "due_date": "2025-04-01",
}


def _error(result):
    assert isinstance(result, Err), result
    return result.error


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"title": None}, task_service.TITLE_REQUIRED),
        ({"title": "   "}, task_service.TITLE_REQUIRED),
        ({"title": "", "due_date": None}, task_service.TITLE_REQUIRED),
        ({"due_date": None}, task_service.DUE_DATE_REQUIRED),
        ({"due_date": "someday", "priority": "urgent"}, task_service.DUE_DATE_REQUIRED),
        ({"priority": "urgent", "status": "blocked"}, task_service.PRIORITY_INVALID),
        ({"status": "blocked"}, task_service.STATUS_INVALID),
    ],
)
def test_create_reports_first_failing_check(overrides, message) -> None:
    repo = InMemoryTaskRepository()

    error = _error(task_service.create_task(repo, **{**VALID, **overrides}))

    assert error.kind is ErrorKind.VALIDATION
    assert error.message == message
    assert repo.count() == 0


def test_create_messages_are_worded_for_clients() -> None:
    assert task_service.PRIORITY_INVALID == "priority must be one of: low, medium, high"
    assert task_service.STATUS_INVALID == "status must be one of: todo, in-progress, done"


def test_create_assigns_server_fields_and_defaults() -> None:
    repo = InMemoryTaskRepository()

    result = task_service.create_task(repo, **{**VALID, "title": "  Write docs  "})

    assert isinstance(result, Ok)
    task = result.value
    assert task.title == "Write docs"
    assert task.description == ""
    assert task.tags == []
    assert task.assigned_to == ""
    assert task.id
    assert task.created_at.endswith("Z")
    assert repo.find_by_id(task.id) == task


def test_list_tasks_search_includes_tags() -> None:
    tagged = make_task(title="Deploy", tags=["devops"])
    repo = InMemoryTaskRepository([tagged, make_task(title="Other")])

    assert task_service.list_tasks(repo, search="DEVOPS") == [tagged]
    assert len(task_service.list_tasks(repo, search="")) == 2


def test_list_tasks_filters_are_exact_matches() -> None:
    done = make_task(status="done", priority="low")
    repo = InMemoryTaskRepository([done, make_task(status="todo", priority="low")])

    assert task_service.list_tasks(repo, status="done") == [done]
    assert task_service.list_tasks(repo, status="done", priority="high") == []
    assert task_service.list_tasks(repo, status="do") == []


def test_get_task_not_found() -> None:
    error = _error(task_service.get_task(InMemoryTaskRepository(), "missing"))
    assert error.kind is ErrorKind.NOT_FOUND
    assert error.message == "Task not found"


def test_update_checks_existence_before_fields() -> None:
    repo = InMemoryTaskRepository()
    error = _error(task_service.update_task(repo, "missing", due_date="nope"))
    assert error.kind is ErrorKind.NOT_FOUND


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"title": "  "}, task_service.TITLE_EMPTY),
        ({"due_date": ""}, task_service.DUE_DATE_INVALID),
        ({"due_date": "2025-13-01"}, task_service.DUE_DATE_INVALID),
        ({"priority": "urgent"}, task_service.PRIORITY_INVALID),
        ({"status": "blocked"}, task_service.STATUS_INVALID),
    ],
)
def test_update_rejects_invalid_fields(changes, message) -> None:
    task = make_task()
    repo = InMemoryTaskRepository([task])

    error = _error(task_service.update_task(repo, task.id, **changes))

    assert error.message == message
    assert repo.find_by_id(task.id) == task


def test_update_changes_only_supplied_fields() -> None:
    task = make_task(title="Keep", description="Also keep", tags=["a", "a"])
    repo = InMemoryTaskRepository([task])

    result = task_service.update_task(repo, task.id, status="done", tags=["b"])

    assert isinstance(result, Ok)
    updated = result.value
    assert updated.status == "done"
    assert updated.tags == ["b"]
    assert updated.title == "Keep"
    assert updated.description == "Also keep"
    assert updated.created_at == task.created_at


def test_delete_task() -> None:
    task = make_task()
    repo = InMemoryTaskRepository([task])

    assert task_service.delete_task(repo, task.id) == Ok(None)
    assert _error(task_service.delete_task(repo, task.id)).kind is ErrorKind.NOT_FOUND
