"""Shared utilities for Taskboard CLI commands.

- API URL option and settings resolution
- Formatted output helpers (error, success, info)
- Task formatting for display
"""

from datetime import date
from typing import Annotated, Optional, TypeVar

import typer

from taskboard.client import TaskApiClient
from taskboard.config import Settings, get_settings
from taskboard.domain.shared import Err, Result
from taskboard.domain.task import Task, is_overdue

T = TypeVar("T")

# Usage: def my_command(api_url: ApiUrlOption = None) -> None:
ApiUrlOption = Annotated[
    Optional[str],
    typer.Option(
        "--api-url",
        help="Taskboard API base URL (or set TASKBOARD_API_URL env var)",
        envvar="TASKBOARD_API_URL",
    ),
]

_STATUS_MARKS = {"todo": "[ ]", "in-progress": "[~]", "done": "[x]"}
_PRIORITY_COLORS = {
    "low": typer.colors.BLUE,
    "medium": typer.colors.YELLOW,
    "high": typer.colors.RED,
}


def make_client(api_url: str | None, settings: Settings | None = None) -> TaskApiClient:
    """API client for the explicit URL, or the configured one."""
    settings = settings or get_settings()
    return TaskApiClient(api_url or settings.api_url, timeout=settings.timeout)


def print_error(msg: str) -> None:
    """Print a formatted error message."""
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message."""
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message."""
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_separator(char: str = "=", width: int = 60) -> None:
    typer.echo(char * width)


def print_header(title: str, width: int = 60) -> None:
    print_separator("=", width)
    typer.echo(title)
    print_separator("=", width)


def exit_on_err(result: Result[T, str]) -> T:
    """Return the Ok value, or print the error and exit with code 1."""
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    return result.value


def _overdue_label(task: Task, today: date | None) -> str:
    if is_overdue(task, today or date.today()):
        return typer.style("OVERDUE", fg=typer.colors.RED, bold=True)
    return ""


def format_task_line(task: Task, today: date | None = None) -> str:
    """One-line summary: status mark, priority, title, due date and short ID.

    Tasks past their due date and not done get an OVERDUE tag.
    """
    mark = _STATUS_MARKS.get(task.status.value, "[?]")
    priority = typer.style(
        f"{task.priority.value:<6}", fg=_PRIORITY_COLORS.get(task.priority.value)
    )
    line = f"{mark} {priority} {task.title}  (due {task.due_date})  {task.id[:8]}"
    overdue = _overdue_label(task, today)
    return f"{line}  {overdue}" if overdue else line


def print_task(task: Task, today: date | None = None) -> None:
    """Print every field of a task."""
    print_header(f"TASK: {task.title}")
    typer.echo(f"ID:          {task.id}")
    typer.echo(f"Status:      {task.status.value}")
    typer.echo(f"Priority:    {task.priority.value}")
    overdue = _overdue_label(task, today)
    typer.echo(f"Due:         {task.due_date}" + (f"  {overdue}" if overdue else ""))
    typer.echo(f"Created:     {task.created_at}")
    if task.assigned_to:
        typer.echo(f"Assigned to: {task.assigned_to}")
    if task.tags:
        typer.echo(f"Tags:        {', '.join(task.tags)}")
    if task.description:
        typer.echo(f"\n{task.description}")
    print_separator()


__all__ = [
    "ApiUrlOption",
    "make_client",
    "print_error",
    "print_success",
    "print_info",
    "print_separator",
    "print_header",
    "exit_on_err",
    "format_task_line",
    "print_task",
]
