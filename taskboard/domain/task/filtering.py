"""Pure task filtering and ordering combinators.

All functions in this module are pure - no I/O, no side effects.
They take tasks in and return new lists; the input is never reordered.
"""

from collections.abc import Callable, Iterable
from datetime import date

from .models import ALL, Task, TaskFilters, TaskStatus
from .validation import parse_date, parse_timestamp

TaskPredicate = Callable[[Task], bool]


# =============================================================================
# Predicates
# =============================================================================


def has_status(status: str) -> TaskPredicate:
    """Match tasks with exactly this status; ``"all"`` matches everything."""
    if status == ALL:
        return lambda task: True
    return lambda task: task.status == status


def has_priority(priority: str) -> TaskPredicate:
    """Match tasks with exactly this priority; ``"all"`` matches everything."""
    if priority == ALL:
        return lambda task: True
    return lambda task: task.priority == priority


def matches_search(search: str, *, include_tags: bool = False) -> TaskPredicate:
    """Case-insensitive substring match on title or description.

    A blank search matches everything. With ``include_tags`` a hit on any tag
    also counts.
    """
    keyword = search.strip().lower()
    if not keyword:
        return lambda task: True

    def predicate(task: Task) -> bool:
        if keyword in task.title.lower() or keyword in task.description.lower():
            return True
        return include_tags and any(keyword in tag.lower() for tag in task.tags)

    return predicate


def all_of(*predicates: TaskPredicate) -> TaskPredicate:
    """AND-combine predicates."""
    return lambda task: all(p(task) for p in predicates)


def is_overdue(task: Task, today: date) -> bool:
    """True if the task is not done and its due date is before ``today``.

    A task due today is not overdue yet. An unreadable due date never is.
    """
    if task.status == TaskStatus.DONE:
        return False
    due = parse_date(task.due_date)
    return due is not None and due < today


# =============================================================================
# Pipeline
# =============================================================================


def filter_tasks(
    tasks: Iterable[Task],
    filters: TaskFilters,
    *,
    include_tags: bool = False,
) -> list[Task]:
    """Apply status, priority and search filters, keeping input order."""
    predicate = all_of(
        has_status(filters.status),
        has_priority(filters.priority),
        matches_search(filters.search, include_tags=include_tags),
    )
    return [task for task in tasks if predicate(task)]


def sort_newest_first(tasks: Iterable[Task]) -> list[Task]:
    """Order by createdAt descending. Equal timestamps keep their relative order."""
    return sorted(tasks, key=lambda task: parse_timestamp(task.created_at), reverse=True)


def select_visible(
    tasks: Iterable[Task],
    filters: TaskFilters,
    *,
    include_tags: bool = False,
) -> list[Task]:
    """Filter then sort: the list a task view actually shows."""
    return sort_newest_first(filter_tasks(tasks, filters, include_tags=include_tags))
