# tests/test_board.py

from __future__ import annotations

from taskboard.client import TaskApiClient, TaskBoard, TaskStore
from taskboard.domain.shared import Err, Ok

from .factories import make_task
from .fakes import FlakyHandler, mock_api


async def test_refresh_returns_view(api: TaskApiClient) -> None:
    board = TaskBoard(TaskStore(api))

    result = await board.refresh()

    assert isinstance(result, Ok)
    assert result.value.total_count == 5
    assert result.value.summary() == "5 total tasks"
    assert len(board.page()) == 5


async def test_filters_reset_to_first_page(api: TaskApiClient) -> None:
    board = TaskBoard(TaskStore(api), page_size=2)
    await board.refresh()
    board.go_to_page(3)

    view = board.apply_filters(priority="high")

    assert board.pagination.current_page == 1
    assert view.summary() == "3 of 5 tasks match your filters"
    assert board.pagination.total_pages == 2

    board.go_to_page(2)
    board.clear_filters()
    assert board.pagination.current_page == 1
    assert board.view.summary() == "5 total tasks"


async def test_go_to_page_clamps_against_current_view(api: TaskApiClient) -> None:
    board = TaskBoard(TaskStore(api), page_size=2)
    await board.refresh()

    assert board.go_to_page(10) == 3
    assert len(board.page()) == 1


async def test_deleting_last_item_on_page_steps_back(api: TaskApiClient) -> None:
    board = TaskBoard(TaskStore(api), page_size=2)
    await board.refresh()
    board.go_to_page(3)
    (last,) = board.page()

    result = await board.delete(last.id)

    assert isinstance(result, Ok)
    assert board.pagination.current_page == 2
    assert len(board.page()) == 2
    assert board.view.total_count == 4


async def test_deleting_on_first_page_stays_put(api: TaskApiClient) -> None:
    board = TaskBoard(TaskStore(api), page_size=2)
    await board.refresh()
    board.apply_filters(status="done")
    (only,) = board.page()

    await board.delete(only.id)

    assert board.pagination.current_page == 1
    assert board.page() == []


async def test_failed_delete_keeps_page(api: TaskApiClient) -> None:
    board = TaskBoard(TaskStore(api), page_size=2)
    await board.refresh()
    board.go_to_page(3)

    result = await board.delete("missing")

    assert result == Err("Task not found")
    assert board.pagination.current_page == 3


async def test_retry_after_failed_load() -> None:
    handler = FlakyHandler([make_task().model_dump(mode="json", by_alias=True)])
    board = TaskBoard(TaskStore(mock_api(handler)))

    first = await board.refresh()
    assert isinstance(first, Err)
    assert board.store.state.error == first.error

    second = await board.retry()
    assert isinstance(second, Ok)
    assert second.value.total_count == 1
    assert board.store.state.error is None
    await board.store.api.close()
