"""Derived task views and pagination.

The visible list is a pure function of (tasks, filters). ``TaskViewSelector``
caches the last result and recomputes only when either input is a different
object, which is the case after every store action that touches them.
"""

import math
from collections.abc import Sequence
from typing import NamedTuple, TypeVar

from taskboard.domain.task import (
    Task,
    TaskFilters,
    TaskStatus,
    select_visible,
    sort_newest_first,
)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 6
RECENT_COUNT = 3


class TaskView(NamedTuple):
    """What a task list shows.

    Attributes:
        tasks: Filtered tasks, newest first.
        total_count: Number of tasks before filtering.
        is_filtered: True if any filter is active.
    """

    tasks: list[Task]
    total_count: int
    is_filtered: bool

    def summary(self) -> str:
        """One-line description, e.g. ``"2 of 5 tasks match your filters"``."""
        if self.is_filtered:
            return f"{len(self.tasks)} of {self.total_count} tasks match your filters"
        return f"{self.total_count} total tasks"


def compute_view(
    tasks: Sequence[Task],
    filters: TaskFilters,
    *,
    include_tags: bool = False,
) -> TaskView:
    """Filter, search and sort ``tasks``."""
    return TaskView(
        tasks=select_visible(tasks, filters, include_tags=include_tags),
        total_count=len(tasks),
        is_filtered=filters.is_active,
    )


class TaskStats(NamedTuple):
    """Dashboard numbers: counts per status and the newest few tasks."""

    total: int
    todo: int
    in_progress: int
    done: int
    recent: list[Task]


def summarize_tasks(tasks: Sequence[Task], *, recent: int = RECENT_COUNT) -> TaskStats:
    counts = {status: 0 for status in TaskStatus}
    for task in tasks:
        counts[task.status] += 1
    return TaskStats(
        total=len(tasks),
        todo=counts[TaskStatus.TODO],
        in_progress=counts[TaskStatus.IN_PROGRESS],
        done=counts[TaskStatus.DONE],
        recent=sort_newest_first(tasks)[:recent],
    )


class TaskViewSelector:
    """Memoized ``compute_view``.

    Search matches title and description; pass ``include_tags=True`` to also
    match tags.
    """

    def __init__(self, *, include_tags: bool = False) -> None:
        self.include_tags = include_tags
        self.computations = 0
        self._inputs: tuple[Sequence[Task], TaskFilters] | None = None
        self._view: TaskView | None = None

    def __call__(self, tasks: Sequence[Task], filters: TaskFilters) -> TaskView:
        if (
            self._view is not None
            and self._inputs is not None
            and self._inputs[0] is tasks
            and self._inputs[1] is filters
        ):
            return self._view
        self._view = compute_view(tasks, filters, include_tags=self.include_tags)
        self._inputs = (tasks, filters)
        self.computations += 1
        return self._view


class Pagination:
    """1-based page cursor over a list of ``total_items``.

    Jumps are clamped into range and next/prev stop at the ends. Changing
    ``total_items`` does not move the current page by itself.
    """

    def __init__(self, total_items: int = 0, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.total_items = total_items
        self.page_size = page_size
        self.current_page = 1

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_items / self.page_size))

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    def go_to_page(self, page: int) -> int:
        """Jump to ``page``, clamped into [1, total_pages]. Returns the new page."""
        self.current_page = max(1, min(page, self.total_pages))
        return self.current_page

    def next_page(self) -> int:
        if self.has_next:
            self.current_page += 1
        return self.current_page

    def prev_page(self) -> int:
        if self.has_prev:
            self.current_page -= 1
        return self.current_page

    def page_items(self, items: Sequence[T]) -> list[T]:
        """The slice of ``items`` on the current page."""
        start = (self.current_page - 1) * self.page_size
        return list(items[start : start + self.page_size])
