"""Task application service.

Validates incoming task data and applies it to a repository. Expected
failures (bad input, unknown ids) come back as ``Err(TaskError)``; nothing
here knows about HTTP.
"""

from dataclasses import dataclass
from enum import Enum

from taskboard.domain.shared import Err, Ok, Result
from taskboard.domain.task import (
    PRIORITY_VALUES,
    STATUS_VALUES,
    Task,
    TaskPatch,
    all_of,
    has_priority,
    has_status,
    is_blank,
    is_valid_date,
    is_valid_priority,
    is_valid_status,
    matches_search,
    new_task_id,
    now_timestamp,
)
from taskboard.infrastructure.storage import InMemoryTaskRepository

TITLE_REQUIRED = "Title is required and cannot be empty"
TITLE_EMPTY = "Title cannot be empty"
DUE_DATE_REQUIRED = "dueDate is required and must be a valid date string (e.g. 2025-03-15)"
DUE_DATE_INVALID = "dueDate must be a valid date string"
PRIORITY_INVALID = f"priority must be one of: {', '.join(PRIORITY_VALUES)}"
STATUS_INVALID = f"status must be one of: {', '.join(STATUS_VALUES)}"
NOT_FOUND = "Task not found"


class ErrorKind(str, Enum):
    """Why a task operation was refused."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class TaskError:
    """A refused task operation.

    Attributes:
        kind: Category of the failure.
        message: Human-readable explanation naming the offending field.
    """

    kind: ErrorKind
    message: str


def _invalid(message: str) -> Err[TaskError]:
    return Err(TaskError(ErrorKind.VALIDATION, message))


def _not_found() -> Err[TaskError]:
    return Err(TaskError(ErrorKind.NOT_FOUND, NOT_FOUND))


def list_tasks(
    repo: InMemoryTaskRepository,
    *,
    status: str | None = None,
    priority: str | None = None,
    search: str | None = None,
) -> list[Task]:
    """List tasks matching every supplied filter.

    Status and priority are exact matches. Search is a case-insensitive
    substring match against title, description and tags. Missing or empty
    parameters don't filter.
    """
    predicate = all_of(
        has_status(status) if status else has_status("all"),
        has_priority(priority) if priority else has_priority("all"),
        matches_search(search or "", include_tags=True),
    )
    return [task for task in repo.list_all() if predicate(task)]


def get_task(repo: InMemoryTaskRepository, task_id: str) -> Result[Task, TaskError]:
    """Look up a single task."""
    task = repo.find_by_id(task_id)
    if task is None:
        return _not_found()
    return Ok(task)


def create_task(
    repo: InMemoryTaskRepository,
    *,
    title: str | None = None,
    description: str | None = None,
    priority: str | None = None,
    status: str | None = None,
    due_date: str | None = None,
    tags: list[str] | None = None,
    assigned_to: str | None = None,
) -> Result[Task, TaskError]:
    """Validate and store a new task.

    Checks run in order (title, due date, priority, status) and the first
    failure is reported. The server assigns ``id`` and ``created_at``.

    Returns:
        Ok(Task) with the stored record, or Err(TaskError) of kind VALIDATION.
    """
    if is_blank(title):
        return _invalid(TITLE_REQUIRED)
    if not is_valid_date(due_date):
        return _invalid(DUE_DATE_REQUIRED)
    if not is_valid_priority(priority):
        return _invalid(PRIORITY_INVALID)
    if not is_valid_status(status):
        return _invalid(STATUS_INVALID)

    task = Task(
        id=new_task_id(),
        title=title.strip(),
        description=description or "",
        priority=priority,
        status=status,
        due_date=due_date,
        created_at=now_timestamp(),
        tags=tags or [],
        assigned_to=assigned_to or "",
    )
    repo.add(task)
    return Ok(task)


def update_task(
    repo: InMemoryTaskRepository,
    task_id: str,
    *,
    title: str | None = None,
    description: str | None = None,
    priority: str | None = None,
    status: str | None = None,
    due_date: str | None = None,
    tags: list[str] | None = None,
    assigned_to: str | None = None,
) -> Result[Task, TaskError]:
    """Merge supplied fields into an existing task.

    Arguments left as None are not changed. Unknown ids are reported before
    any field is validated.

    Returns:
        Ok(Task) with the merged record, or Err(TaskError).
    """
    if repo.find_by_id(task_id) is None:
        return _not_found()

    if due_date is not None and not is_valid_date(due_date):
        return _invalid(DUE_DATE_INVALID)
    if title is not None and is_blank(title):
        return _invalid(TITLE_EMPTY)
    if priority is not None and not is_valid_priority(priority):
        return _invalid(PRIORITY_INVALID)
    if status is not None and not is_valid_status(status):
        return _invalid(STATUS_INVALID)

    supplied = {
        "title": title,
        "description": description,
        "priority": priority,
        "status": status,
        "due_date": due_date,
        "tags": tags,
        "assigned_to": assigned_to,
    }
    patch = TaskPatch(**{name: value for name, value in supplied.items() if value is not None})

    result = repo.update(task_id, patch)
    if isinstance(result, Err):
        return _not_found()
    return result


def delete_task(repo: InMemoryTaskRepository, task_id: str) -> Result[None, TaskError]:
    """Remove a task for good."""
    if not repo.delete(task_id):
        return _not_found()
    return Ok(None)
