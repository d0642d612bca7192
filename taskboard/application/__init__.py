"""Application service layer for Taskboard.

Services combine domain rules with the repository and report expected
failures as Result values.

Example usage:
    >>> from taskboard.application import create_task
    >>> from taskboard.domain.shared import is_ok
    >>>
    >>> result = create_task(repo, title="Ship it", due_date="2025-03-15",
    ...                      priority="high", status="todo")
    >>> if is_ok(result):
    ...     print(result.value.id)
"""

from taskboard.application.task_service import (
    ErrorKind,
    TaskError,
    create_task,
    delete_task,
    get_task,
    list_tasks,
    update_task,
)

__all__ = [
    "ErrorKind",
    "TaskError",
    "create_task",
    "delete_task",
    "get_task",
    "list_tasks",
    "update_task",
]
