"""FastAPI routes for Taskboard."""

import logging
from contextlib import asynccontextmanager
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from taskboard import __version__
from taskboard.application import task_service
from taskboard.application.task_service import ErrorKind, TaskError
from taskboard.config import Settings, get_settings
from taskboard.domain.shared import Err, Result
from taskboard.domain.task import Task
from taskboard.infrastructure.storage import InMemoryTaskRepository
from taskboard.interfaces.api.errors import (
    INVALID_JSON,
    describe_error,
    register_error_handlers,
)
from taskboard.interfaces.api.schemas import (
    CreateTaskRequest,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    UpdateTaskRequest,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Dependencies
# =============================================================================


def get_repository(request: Request) -> InMemoryTaskRepository:
    """The repository created with the app."""
    return request.app.state.repository


Repository = Annotated[InMemoryTaskRepository, Depends(get_repository)]

_HTTP_STATUS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
}


def _unwrap(result: Result) -> object:
    """Return the Ok value or raise the matching HTTP error."""
    if isinstance(result, Err):
        error: TaskError = result.error
        raise HTTPException(status_code=_HTTP_STATUS[error.kind], detail=error.message)
    return result.value


# =============================================================================
# Router
# =============================================================================


router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get("", response_model=list[Task])
async def list_tasks(
    repo: Repository,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    search: Optional[str] = None,
):
    """List tasks, optionally filtered by status, priority and search text."""
    return task_service.list_tasks(repo, status=status, priority=priority, search=search)


@router.post("", response_model=Task, status_code=201)
async def create_task(req: CreateTaskRequest, repo: Repository):
    """Create a task."""
    task = _unwrap(task_service.create_task(repo, **req.model_dump()))
    logger.info(f"Created task {task.id} ({task.title!r})")
    return task


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: str, repo: Repository):
    """Get a task by ID."""
    return _unwrap(task_service.get_task(repo, task_id))


async def _read_update(request: Request) -> UpdateTaskRequest:
    """Parse a PUT body by hand, with the same error mapping as the handlers."""
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        logger.warning(f"Unreadable request body on PUT {request.url.path}")
        raise HTTPException(500, detail=INVALID_JSON)
    try:
        return UpdateTaskRequest.model_validate(body)
    except ValidationError as e:
        raise HTTPException(400, detail=describe_error(e.errors()[0]))


@router.put(
    "/{task_id}",
    response_model=Task,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": UpdateTaskRequest.model_json_schema()}},
        }
    },
)
async def update_task(task_id: str, request: Request, repo: Repository):
    """Update some fields of a task.

    The task is looked up before the body is read, so an unknown id is a 404
    whatever the body holds.
    """
    _unwrap(task_service.get_task(repo, task_id))
    req = await _read_update(request)
    task = _unwrap(task_service.update_task(repo, task_id, **req.model_dump(exclude_none=True)))
    logger.info(f"Updated task {task_id}")
    return task


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(task_id: str, repo: Repository):
    """Delete a task."""
    _unwrap(task_service.delete_task(repo, task_id))
    logger.info(f"Deleted task {task_id}")
    return MessageResponse(message="Task deleted")


# =============================================================================
# App Factory
# =============================================================================


def create_app(
    settings: Settings | None = None,
    repository: InMemoryTaskRepository | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Settings to use. Loaded from config/environment if not provided.
        repository: Task repository to serve. A new one (seeded unless
            settings.seed is off) is created if not provided.
    """
    settings = settings or get_settings()
    if repository is None:
        repository = (
            InMemoryTaskRepository.with_seed_data() if settings.seed else InMemoryTaskRepository()
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Taskboard API ready ({app.state.repository.count()} tasks)")
        yield
        logger.info("Taskboard API shutting down")

    app = FastAPI(
        title="Taskboard",
        description="Create, list, filter, edit and delete tasks",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.repository = repository
    app.state.settings = settings

    # CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/")
    def root():
        return {"name": "Taskboard", "version": __version__}

    @app.get("/health", response_model=HealthResponse)
    async def health(repo: Repository):
        return HealthResponse(tasks=repo.count())

    return app
