"""Async HTTP client for the Taskboard API."""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from taskboard.domain.task import ALL, Task, TaskDraft, TaskFilters, TaskPatch

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:8000"


class TaskApiError(Exception):
    """A request that did not produce the expected response.

    Attributes:
        message: The server's ``error`` string, or a generic description.
        status_code: HTTP status, or None for transport failures.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


def filters_to_params(filters: TaskFilters | None) -> dict[str, str]:
    """Query parameters for a list request; ``all`` and blank values are left out."""
    if filters is None:
        return {}
    params: dict[str, str] = {}
    if filters.status != ALL:
        params["status"] = str(getattr(filters.status, "value", filters.status))
    if filters.priority != ALL:
        params["priority"] = str(getattr(filters.priority, "value", filters.priority))
    if filters.search != "":
        params["search"] = filters.search
    return params


class TaskApiClient:
    """Talks to the /tasks endpoints.

    Non-2xx responses and transport failures raise TaskApiError. The
    ``transport`` argument lets tests route requests straight into an app.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "TaskApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        fallback_error: str,
        **kwargs: Any,
    ) -> Any:
        client = await self._get_client()
        try:
            response = await client.request(method, path, **kwargs)
        except httpx.TimeoutException:
            logger.warning(f"{method} {path} timed out after {self.timeout}s")
            raise TaskApiError(f"{fallback_error}: request timed out") from None
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise TaskApiError(f"{fallback_error}: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            message = body.get("error") if isinstance(body, dict) else None
            raise TaskApiError(message or fallback_error, response.status_code)
        if body is None:
            raise TaskApiError(f"{fallback_error}: response was not JSON", response.status_code)
        return body

    @staticmethod
    def _to_task(data: Any, fallback_error: str) -> Task:
        try:
            return Task.model_validate(data)
        except ValidationError as e:
            raise TaskApiError(f"{fallback_error}: unexpected response ({e.error_count()} errors)") from e

    async def list_tasks(self, filters: TaskFilters | None = None) -> list[Task]:
        """GET /tasks with the active filters as query parameters."""
        error = "Failed to fetch tasks"
        body = await self._request("GET", "/tasks", error, params=filters_to_params(filters))
        if not isinstance(body, list):
            raise TaskApiError(f"{error}: expected a list")
        return [self._to_task(item, error) for item in body]

    async def get_task(self, task_id: str) -> Task:
        """GET /tasks/{id}."""
        error = "Failed to fetch task"
        return self._to_task(await self._request("GET", f"/tasks/{task_id}", error), error)

    async def create_task(self, draft: TaskDraft) -> Task:
        """POST /tasks."""
        error = "Failed to create task"
        payload = draft.model_dump(mode="json", by_alias=True)
        return self._to_task(await self._request("POST", "/tasks", error, json=payload), error)

    async def update_task(self, task_id: str, patch: TaskPatch) -> Task:
        """PUT /tasks/{id} with only the fields set on the patch."""
        error = "Failed to update task"
        payload = patch.model_dump(mode="json", by_alias=True, exclude_unset=True)
        body = await self._request("PUT", f"/tasks/{task_id}", error, json=payload)
        return self._to_task(body, error)

    async def delete_task(self, task_id: str) -> str:
        """DELETE /tasks/{id}. Returns the server's confirmation message."""
        body = await self._request("DELETE", f"/tasks/{task_id}", "Failed to delete task")
        return body.get("message", "") if isinstance(body, dict) else ""
