"""Task domain models.

Pure domain models for task management. Uses Pydantic for serialization;
JSON field names are camelCase (``dueDate``, ``createdAt``, ``assignedTo``)
while Python attributes stay snake_case.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ALL = "all"


class TaskPriority(str, Enum):
    """How urgent a task is."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskStatus(str, Enum):
    """Where a task is in its lifecycle."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


PRIORITY_VALUES: tuple[str, ...] = tuple(p.value for p in TaskPriority)
STATUS_VALUES: tuple[str, ...] = tuple(s.value for s in TaskStatus)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Task(_CamelModel):
    """A unit of work.

    ``id`` and ``created_at`` are assigned by the server when the task is
    created and never change afterwards.
    """

    id: str
    title: str
    description: str = ""
    priority: TaskPriority
    status: TaskStatus
    due_date: str
    created_at: str
    tags: list[str] = Field(default_factory=list)
    assigned_to: str = ""


class TaskDraft(_CamelModel):
    """Everything needed to create a task (a Task minus id and createdAt)."""

    title: str
    description: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.TODO
    due_date: str
    tags: list[str] = Field(default_factory=list)
    assigned_to: str = ""


class TaskPatch(_CamelModel):
    """A partial update.

    Only fields that were explicitly set are applied. There is no ``id`` or
    ``created_at`` field, so neither can be changed through a patch.
    """

    title: str | None = None
    description: str | None = None
    priority: TaskPriority | None = None
    status: TaskStatus | None = None
    due_date: str | None = None
    tags: list[str] | None = None
    assigned_to: str | None = None

    def changes(self) -> dict:
        """Fields that were explicitly set, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)

    def apply(self, task: Task) -> Task:
        """Return a copy of ``task`` with this patch merged in."""
        return task.model_copy(update=self.changes())


class TaskFilters(BaseModel):
    """Which tasks a list view shows. ``"all"`` disables a filter."""

    model_config = ConfigDict(frozen=True)

    status: TaskStatus | Literal["all"] = ALL
    priority: TaskPriority | Literal["all"] = ALL
    search: str = ""

    @property
    def is_active(self) -> bool:
        """True if at least one filter narrows the list."""
        return self.status != ALL or self.priority != ALL or self.search.strip() != ""


DEFAULT_FILTERS = TaskFilters()


def new_task_id() -> str:
    """Generate an opaque unique task id."""
    return str(uuid4())


def now_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
