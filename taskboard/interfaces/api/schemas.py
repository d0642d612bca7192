"""Request/Response schemas for the Taskboard API.

Request bodies are deliberately loose (every field optional, enums as plain
strings) so that the task service, not pydantic, decides which field is
wrong and words the error. Responses reuse the domain Task model.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _TaskFieldsRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[str] = None
    tags: Optional[list[str]] = None
    assigned_to: Optional[str] = None


class CreateTaskRequest(_TaskFieldsRequest):
    """Request to create a task. ``id`` and ``createdAt`` are ignored if sent."""


class UpdateTaskRequest(_TaskFieldsRequest):
    """Request to update a task. Only fields present in the body change."""


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error: str


class MessageResponse(BaseModel):
    """Confirmation message."""

    message: str


class HealthResponse(BaseModel):
    """Liveness check."""

    status: str = "ok"
    tasks: int
