"""Task list controller.

Wires the store, the memoized view and pagination together the way a task
list screen uses them: load, filter, page through, delete, retry.
"""

import logging
from typing import Any

from taskboard.client.store import TaskStore
from taskboard.client.view import DEFAULT_PAGE_SIZE, Pagination, TaskView, TaskViewSelector
from taskboard.domain.shared import Result, is_ok, map_result
from taskboard.domain.task import Task

logger = logging.getLogger(__name__)


class TaskBoard:
    """A paginated, filterable list of the tasks held by a TaskStore."""

    def __init__(self, store: TaskStore, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.store = store
        self.selector = TaskViewSelector()
        self.pagination = Pagination(page_size=page_size)

    @property
    def view(self) -> TaskView:
        """Current derived view; keeps the page count in step with it."""
        state = self.store.state
        view = self.selector(state.tasks, state.filters)
        self.pagination.total_items = len(view.tasks)
        return view

    def page(self) -> list[Task]:
        """Tasks on the current page."""
        return self.pagination.page_items(self.view.tasks)

    async def refresh(self) -> Result[TaskView, str]:
        """Load every task from the server and return the new view."""
        return map_result(await self.store.load(), lambda _: self.view)

    async def retry(self) -> Result[TaskView, str]:
        """Re-run the load after a failure. There is no automatic retry."""
        logger.info("Retrying task load")
        return await self.refresh()

    def apply_filters(self, **changes: Any) -> TaskView:
        """Update filters and go back to the first page."""
        self.store.set_filters(**changes)
        view = self.view
        self.pagination.go_to_page(1)
        return view

    def clear_filters(self) -> TaskView:
        self.store.clear_filters()
        view = self.view
        self.pagination.go_to_page(1)
        return view

    def go_to_page(self, page: int) -> int:
        self.view  # refresh total_items before clamping
        return self.pagination.go_to_page(page)

    async def delete(self, task_id: str) -> Result[str, str]:
        """Delete a task; step back a page if it was the last one on its page."""
        on_page = self.page()
        result = await self.store.remove(task_id)
        if is_ok(result) and len(on_page) == 1 and self.pagination.current_page > 1:
            self.pagination.go_to_page(self.pagination.current_page - 1)
        return result
