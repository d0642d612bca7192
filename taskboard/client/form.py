"""Form state for creating and editing tasks.

A ``TaskForm`` holds the raw, editable field values until the user submits.
It never talks to the network: ``submit`` hands a clean ``TaskDraft`` to a
callback supplied by the caller.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, fields, replace
from typing import TypeVar

from taskboard.domain.task import (
    Task,
    TaskDraft,
    TaskPriority,
    TaskStatus,
    is_blank,
    is_valid_date,
    is_valid_priority,
    is_valid_status,
)

R = TypeVar("R")


def parse_tags(text: str) -> list[str]:
    """Turn ``"frontend, bug fix,"`` into ``["frontend", "bug fix"]``.

    Whitespace is trimmed and empty entries dropped. Duplicates are kept.
    """
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def format_tags(tags: Iterable[str]) -> str:
    """Inverse of parse_tags for display in a single text field."""
    return ", ".join(tags)


@dataclass(frozen=True, slots=True)
class TaskFormValues:
    """Raw field values as typed by the user."""

    title: str = ""
    description: str = ""
    priority: str = TaskPriority.MEDIUM.value
    status: str = TaskStatus.TODO.value
    due_date: str = ""
    assigned_to: str = ""
    tags: str = ""

    @classmethod
    def from_task(cls, task: Task) -> "TaskFormValues":
        return cls(
            title=task.title,
            description=task.description,
            priority=task.priority.value,
            status=task.status.value,
            due_date=task.due_date,
            assigned_to=task.assigned_to,
            tags=format_tags(task.tags),
        )


FIELD_NAMES = frozenset(f.name for f in fields(TaskFormValues))


def validate_values(values: TaskFormValues) -> dict[str, str]:
    """Per-field error messages; empty when the values are valid."""
    errors: dict[str, str] = {}
    if is_blank(values.title):
        errors["title"] = "Title is required"
    if not values.due_date:
        errors["due_date"] = "Due date is required"
    elif not is_valid_date(values.due_date):
        errors["due_date"] = "Due date must be a valid date"
    if not is_valid_priority(values.priority):
        errors["priority"] = "Priority must be low, medium, or high"
    if not is_valid_status(values.status):
        errors["status"] = "Status must be todo, in-progress, or done"
    return errors


class TaskForm:
    """Editable state for one create or edit form.

    Example:
        >>> form = TaskForm()
        >>> form.set_field("title", "Write docs")
        >>> form.set_field("due_date", "2025-04-01")
        >>> draft = form.submit(lambda d: d)
        >>> draft.title
        'Write docs'
    """

    def __init__(self, task: Task | None = None) -> None:
        self.task = task
        self._initial = TaskFormValues.from_task(task) if task else TaskFormValues()
        self.values = self._initial
        self.errors: dict[str, str] = {}

    @property
    def is_edit(self) -> bool:
        return self.task is not None

    def set_field(self, name: str, value: str) -> None:
        """Change one field and clear the error recorded for it."""
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown form field: {name}")
        self.values = replace(self.values, **{name: value})
        self.errors.pop(name, None)

    def validate(self) -> bool:
        """Recompute all field errors. Returns True if the form is valid."""
        self.errors = validate_values(self.values)
        return not self.errors

    def to_draft(self) -> TaskDraft:
        """Build the record to send. Only meaningful after a passing validate()."""
        return TaskDraft(
            title=self.values.title.strip(),
            description=self.values.description.strip(),
            priority=self.values.priority,
            status=self.values.status,
            due_date=self.values.due_date,
            assigned_to=self.values.assigned_to.strip(),
            tags=parse_tags(self.values.tags),
        )

    def submit(self, on_submit: Callable[[TaskDraft], R]) -> R | None:
        """Validate and, if valid, call ``on_submit`` with the cleaned draft.

        Returns whatever ``on_submit`` returns, or None when validation fails
        (the errors stay in ``self.errors``).
        """
        if not self.validate():
            return None
        return on_submit(self.to_draft())

    def reset(self) -> None:
        """Restore the initial values and clear all errors."""
        self.values = self._initial
        self.errors = {}
