"""Client side of Taskboard.

- api_client: async httpx wrapper around the /tasks endpoints
- store: session state container with per-operation request status
- view: memoized filtered/sorted view, pagination and dashboard stats
- form: create/edit form state and validation
- board: task list controller combining the above
"""

from taskboard.client.api_client import TaskApiClient, TaskApiError
from taskboard.client.board import TaskBoard
from taskboard.client.form import TaskForm, format_tags, parse_tags
from taskboard.client.store import (
    OperationKind,
    OperationState,
    OperationStatus,
    TaskState,
    TaskStore,
)
from taskboard.client.view import (
    Pagination,
    TaskStats,
    TaskView,
    TaskViewSelector,
    compute_view,
    summarize_tasks,
)

__all__ = [
    "TaskApiClient",
    "TaskApiError",
    "TaskBoard",
    "TaskForm",
    "format_tags",
    "parse_tags",
    "OperationKind",
    "OperationState",
    "OperationStatus",
    "TaskState",
    "TaskStore",
    "Pagination",
    "TaskView",
    "TaskViewSelector",
    "compute_view",
    "TaskStats",
    "summarize_tasks",
]
