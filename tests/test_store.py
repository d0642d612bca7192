# tests/test_store.py

from __future__ import annotations

import pytest

from taskboard.client import OperationKind, OperationStatus, TaskStore
from taskboard.domain.shared import Err, Ok
from taskboard.domain.task import DEFAULT_FILTERS, TaskDraft, TaskFilters, TaskPatch, TaskStatus

from .factories import make_task
from .fakes import FlakyHandler, mock_api, refuse


@pytest.fixture()
def offline_store() -> TaskStore:
    """Store for the synchronous actions; its API is never reached."""
    return TaskStore(mock_api(refuse))


# ---------------------------------------------------------------------------
# Synchronous actions
# ---------------------------------------------------------------------------


def test_set_add_update_delete(offline_store: TaskStore) -> None:
    a, b, c = make_task(), make_task(), make_task()

    offline_store.set_tasks([a, b])
    offline_store.add_task(c)
    assert offline_store.state.tasks == (c, a, b)

    offline_store.update_task(a.id, {"status": "done", "title": "Changed"})
    changed = offline_store.state.tasks[1]
    assert changed.status is TaskStatus.DONE
    assert changed.title == "Changed"
    assert changed.id == a.id

    offline_store.delete_task(b.id)
    assert [t.id for t in offline_store.state.tasks] == [c.id, a.id]


def test_update_task_accepts_patch_and_ignores_unknown_id(offline_store: TaskStore) -> None:
    task = make_task()
    offline_store.set_tasks([task])
    before = offline_store.state.tasks

    offline_store.update_task("missing", TaskPatch(title="x"))
    assert offline_store.state.tasks == before

    offline_store.update_task(task.id, TaskPatch(priority="high"))
    assert offline_store.state.tasks[0].priority == "high"


def test_snapshots_are_replaced_not_mutated(offline_store: TaskStore) -> None:
    offline_store.set_tasks([make_task()])
    snapshot = offline_store.state

    offline_store.add_task(make_task())

    assert len(snapshot.tasks) == 1
    assert offline_store.state is not snapshot


def test_filters_merge_and_clear(offline_store: TaskStore) -> None:
    offline_store.set_filters(search="login")
    offline_store.set_filters(status="done")

    assert offline_store.state.filters == TaskFilters(status="done", search="login")

    offline_store.clear_filters()
    assert offline_store.state.filters == DEFAULT_FILTERS


def test_selected_task(offline_store: TaskStore) -> None:
    task = make_task()
    offline_store.set_selected_task(task)
    assert offline_store.state.selected == task
    offline_store.set_selected_task(None)
    assert offline_store.state.selected is None


def test_subscribe_and_unsubscribe(offline_store: TaskStore) -> None:
    seen = []
    unsubscribe = offline_store.subscribe(lambda state: seen.append(len(state.tasks)))

    offline_store.add_task(make_task())
    offline_store.add_task(make_task())
    unsubscribe()
    offline_store.add_task(make_task())

    assert seen == [1, 2]
    unsubscribe()


# ---------------------------------------------------------------------------
# Async operations
# ---------------------------------------------------------------------------


async def test_load_replaces_collection(store: TaskStore) -> None:
    statuses = []
    store.subscribe(lambda state: statuses.append(state.operation(OperationKind.LOAD).status))
    store.set_tasks([make_task()])

    result = await store.load()

    assert isinstance(result, Ok)
    assert len(store.state.tasks) == 5
    assert store.state.status is OperationStatus.SUCCEEDED
    assert statuses[-2:] == [OperationStatus.LOADING, OperationStatus.SUCCEEDED]
    assert not store.state.is_loading


async def test_load_sends_filters_without_touching_store_filters(store: TaskStore) -> None:
    result = await store.load(TaskFilters(priority="high"))

    assert isinstance(result, Ok)
    assert len(result.value) == 3
    assert store.state.filters == DEFAULT_FILTERS


async def test_load_failure_then_success_clears_error() -> None:
    handler = FlakyHandler([make_task().model_dump(mode="json", by_alias=True)])
    store = TaskStore(mock_api(handler))

    result = await store.load()

    assert isinstance(result, Err)
    assert result.error.startswith("Failed to fetch tasks")
    assert store.state.error == result.error
    assert store.state.operation(OperationKind.LOAD).status is OperationStatus.FAILED

    assert isinstance(await store.load(), Ok)
    assert store.state.error is None
    assert len(store.state.tasks) == 1
    assert handler.calls == 2
    await store.api.close()


async def test_create_prepends_confirmed_task(store: TaskStore) -> None:
    await store.load()

    result = await store.create(TaskDraft(title="Write docs", due_date="2025-04-01"))

    assert isinstance(result, Ok)
    assert store.state.tasks[0] == result.value
    assert len(store.state.tasks) == 6
    assert len({t.id for t in store.state.tasks}) == 6


async def test_create_failure_leaves_collection(store: TaskStore) -> None:
    await store.load()
    before = store.state.tasks

    result = await store.create(TaskDraft(title=" ", due_date="2025-04-01"))

    assert result == Err("Title is required and cannot be empty")
    assert store.state.tasks == before
    assert store.state.error == "Title is required and cannot be empty"
    assert store.state.operation(OperationKind.CREATE).status is OperationStatus.FAILED


async def test_edit_merges_server_record(store: TaskStore) -> None:
    await store.load()
    target = store.state.tasks[2]

    result = await store.edit(target.id, TaskPatch(status="done"))

    assert isinstance(result, Ok)
    merged = store.state.tasks[2]
    assert merged.status is TaskStatus.DONE
    assert merged.model_dump(exclude={"status"}) == target.model_dump(exclude={"status"})


async def test_remove_drops_task(store: TaskStore) -> None:
    await store.load()
    target = store.state.tasks[0]

    assert await store.remove(target.id) == Ok(target.id)
    assert target.id not in {t.id for t in store.state.tasks}
    assert len(store.state.tasks) == 4


async def test_status_is_tracked_per_operation(store: TaskStore) -> None:
    await store.load()
    target = store.state.tasks[0]

    edit = await store.edit("missing", TaskPatch(title="x"))
    remove = await store.remove(target.id)

    assert edit == Err("Task not found")
    assert isinstance(remove, Ok)
    assert store.state.operation(OperationKind.EDIT).status is OperationStatus.FAILED
    assert store.state.operation(OperationKind.EDIT).error == "Task not found"
    assert store.state.operation(OperationKind.REMOVE).status is OperationStatus.SUCCEEDED
    assert store.state.operation(OperationKind.CREATE).status is OperationStatus.IDLE
    assert store.state.status is OperationStatus.SUCCEEDED
    assert store.state.error == "Task not found"
