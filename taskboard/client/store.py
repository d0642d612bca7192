"""Client-side state container for a task session.

``TaskStore`` is the single source of truth for the tasks a client shows:
the cached collection, active filters, selection and request status. State
only changes through its actions; readers get immutable snapshots and can
subscribe to be told when a new one is available.

Request status is tracked per operation kind (load, create, edit, remove),
so an edit failing while a delete succeeds stays visible. Every async
operation also returns its own Result, which is what callers should branch
on.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from taskboard.client.api_client import TaskApiClient, TaskApiError
from taskboard.domain.shared import Err, Ok, Result
from taskboard.domain.task import DEFAULT_FILTERS, Task, TaskDraft, TaskFilters, TaskPatch

logger = logging.getLogger(__name__)

Listener = Callable[["TaskState"], None]


class OperationKind(str, Enum):
    """The async operations the store performs."""

    LOAD = "load"
    CREATE = "create"
    EDIT = "edit"
    REMOVE = "remove"


class OperationStatus(str, Enum):
    """Outcome of the latest request of one kind."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class OperationState:
    status: OperationStatus = OperationStatus.IDLE
    error: str | None = None


def _idle_operations() -> dict[OperationKind, OperationState]:
    return {kind: OperationState() for kind in OperationKind}


@dataclass(frozen=True, slots=True)
class TaskState:
    """Immutable snapshot of the store.

    Attributes:
        tasks: Cached tasks, newest additions first.
        filters: Active view filters.
        selected: The task the user is looking at, if any.
        operations: Latest status per operation kind.
        status: Most recent status transition of any kind.
        error: Most recent error message, cleared when a load starts.
    """

    tasks: tuple[Task, ...] = ()
    filters: TaskFilters = DEFAULT_FILTERS
    selected: Task | None = None
    operations: dict[OperationKind, OperationState] = field(default_factory=_idle_operations)
    status: OperationStatus = OperationStatus.IDLE
    error: str | None = None

    @property
    def is_loading(self) -> bool:
        """True while any request is in flight."""
        return any(op.status == OperationStatus.LOADING for op in self.operations.values())

    def operation(self, kind: OperationKind) -> OperationState:
        return self.operations[kind]


class TaskStore:
    """Holds the task session state and keeps it in sync with the API."""

    def __init__(self, api: TaskApiClient, state: TaskState | None = None) -> None:
        self.api = api
        self._state = state or TaskState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> TaskState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with the new state after every change.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)

    # =========================================================================
    # Synchronous actions
    # =========================================================================

    def set_tasks(self, tasks: list[Task] | tuple[Task, ...]) -> None:
        """Replace the whole collection."""
        self._commit(tasks=tuple(tasks))

    def add_task(self, task: Task) -> None:
        """Put a task at the front of the collection."""
        self._commit(tasks=(task, *self._state.tasks))

    def update_task(self, task_id: str, data: Task | TaskPatch | dict[str, Any]) -> None:
        """Merge fields into the task with this ID. Unknown IDs are ignored."""
        self._commit(tasks=self._merged(task_id, data))

    def delete_task(self, task_id: str) -> None:
        """Drop the task with this ID from the collection."""
        self._commit(tasks=self._without(task_id))

    def set_selected_task(self, task: Task | None) -> None:
        self._commit(selected=task)

    def set_filters(self, **changes: Any) -> None:
        """Shallow-merge filter values, e.g. ``set_filters(status="done")``."""
        merged = {**self._state.filters.model_dump(), **changes}
        self._commit(filters=TaskFilters.model_validate(merged))

    def clear_filters(self) -> None:
        """Back to status=all, priority=all, no search."""
        self._commit(filters=DEFAULT_FILTERS)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _merged(self, task_id: str, data: Task | TaskPatch | dict[str, Any]) -> tuple[Task, ...]:
        if isinstance(data, Task):
            changes = data.model_dump(exclude={"id"})
        elif isinstance(data, TaskPatch):
            changes = data.changes()
        else:
            changes = TaskPatch.model_validate(data).changes()
        return tuple(
            task.model_copy(update=changes) if task.id == task_id else task
            for task in self._state.tasks
        )

    def _without(self, task_id: str) -> tuple[Task, ...]:
        return tuple(task for task in self._state.tasks if task.id != task_id)

    def _transition(
        self,
        kind: OperationKind,
        status: OperationStatus,
        message: str | None = None,
        **changes: Any,
    ) -> None:
        operations = {**self._state.operations, kind: OperationState(status, message)}
        if message is not None:
            changes["error"] = message
        self._commit(operations=operations, status=status, **changes)

    def _fail(self, kind: OperationKind, e: TaskApiError) -> Err[str]:
        logger.warning(f"Task {kind.value} failed: {e.message}")
        self._transition(kind, OperationStatus.FAILED, e.message)
        return Err(e.message)

    # =========================================================================
    # Async operations
    # =========================================================================

    async def load(self, filters: TaskFilters | None = None) -> Result[list[Task], str]:
        """Fetch tasks and replace the collection.

        Args:
            filters: Sent to the server as query parameters. The store's own
                filters are not touched.
        """
        self._transition(OperationKind.LOAD, OperationStatus.LOADING, error=None)
        try:
            tasks = await self.api.list_tasks(filters)
        except TaskApiError as e:
            return self._fail(OperationKind.LOAD, e)
        self._transition(OperationKind.LOAD, OperationStatus.SUCCEEDED, tasks=tuple(tasks))
        return Ok(tasks)

    async def create(self, draft: TaskDraft) -> Result[Task, str]:
        """Create a task on the server, then put it first in the collection.

        Nothing is inserted until the server confirms.
        """
        self._transition(OperationKind.CREATE, OperationStatus.LOADING)
        try:
            task = await self.api.create_task(draft)
        except TaskApiError as e:
            return self._fail(OperationKind.CREATE, e)
        self._transition(
            OperationKind.CREATE,
            OperationStatus.SUCCEEDED,
            tasks=(task, *self._state.tasks),
        )
        return Ok(task)

    async def edit(self, task_id: str, patch: TaskPatch) -> Result[Task, str]:
        """Update a task on the server and merge the returned record."""
        self._transition(OperationKind.EDIT, OperationStatus.LOADING)
        try:
            task = await self.api.update_task(task_id, patch)
        except TaskApiError as e:
            return self._fail(OperationKind.EDIT, e)
        self._transition(
            OperationKind.EDIT, OperationStatus.SUCCEEDED, tasks=self._merged(task.id, task)
        )
        return Ok(task)

    async def remove(self, task_id: str) -> Result[str, str]:
        """Delete a task on the server, then drop it from the collection."""
        self._transition(OperationKind.REMOVE, OperationStatus.LOADING)
        try:
            await self.api.delete_task(task_id)
        except TaskApiError as e:
            return self._fail(OperationKind.REMOVE, e)
        self._transition(
            OperationKind.REMOVE, OperationStatus.SUCCEEDED, tasks=self._without(task_id)
        )
        return Ok(task_id)
