"""Task CLI commands.

Commands that talk to a running Taskboard API: stats, list, show, create,
edit and delete. Each one drives the client pipeline (store, view, form)
the same way an interactive front end would.
"""

import asyncio
from typing import Optional

import typer
from pydantic import ValidationError

from taskboard.client import TaskApiError, TaskBoard, TaskForm, TaskStore, summarize_tasks
from taskboard.config import get_settings
from taskboard.domain.task import TaskDraft, TaskPatch
from taskboard.interfaces.cli.common import (
    ApiUrlOption,
    exit_on_err,
    format_task_line,
    make_client,
    print_error,
    print_header,
    print_info,
    print_separator,
    print_success,
    print_task,
)

# CLI option name -> form field name
_FORM_FIELDS = {
    "title": "title",
    "description": "description",
    "priority": "priority",
    "status": "status",
    "due": "due_date",
    "assignee": "assigned_to",
    "tags": "tags",
}

_INVALID_FILTER = (
    "Invalid filter: status must be todo, in-progress, done or all; "
    "priority must be low, medium, high or all"
)


# =============================================================================
# Helpers
# =============================================================================


def _fill_form(form: TaskForm, **options: Optional[str]) -> list[str]:
    """Copy the given CLI options into the form. Returns the fields touched."""
    touched = []
    for option, value in options.items():
        if value is None:
            continue
        field = _FORM_FIELDS[option]
        form.set_field(field, value)
        touched.append(field)
    return touched


def _validated_draft(form: TaskForm) -> TaskDraft:
    """Submit the form, or print its errors and exit."""
    draft = form.submit(lambda d: d)
    if draft is None:
        for field, message in form.errors.items():
            print_error(f"{field}: {message}")
        raise typer.Exit(1)
    return draft


# =============================================================================
# Commands
# =============================================================================


def stats(api_url: ApiUrlOption = None) -> None:
    """Show task counts per status and the most recently created tasks."""

    async def run() -> None:
        async with make_client(api_url) as api:
            store = TaskStore(api)
            exit_on_err(await store.load())
            summary = summarize_tasks(store.state.tasks)

            print_header("DASHBOARD")
            typer.echo(f"Total tasks:  {summary.total}")
            typer.echo(f"To do:        {summary.todo}")
            typer.echo(f"In progress:  {summary.in_progress}")
            typer.echo(f"Done:         {summary.done}")
            print_separator("-")
            print_info("Recent tasks")
            if not summary.recent:
                typer.echo("No tasks yet")
            for task in summary.recent:
                typer.echo(format_task_line(task))

    asyncio.run(run())


def list_tasks(
    status: str = typer.Option("all", "--status", "-s", help="todo, in-progress, done or all"),
    priority: str = typer.Option("all", "--priority", "-p", help="low, medium, high or all"),
    search: str = typer.Option("", "--search", "-q", help="Match title or description"),
    page: int = typer.Option(1, "--page", help="Page number (clamped into range)"),
    api_url: ApiUrlOption = None,
) -> None:
    """List tasks, newest first, one page at a time.

    Example:
        taskboard list --status todo --search login --page 2
    """
    settings = get_settings()

    async def run() -> None:
        async with make_client(api_url, settings) as api:
            board = TaskBoard(TaskStore(api), page_size=settings.page_size)
            exit_on_err(await board.refresh())
            try:
                view = board.apply_filters(status=status, priority=priority, search=search)
            except ValidationError:
                print_error(_INVALID_FILTER)
                raise typer.Exit(1)
            board.go_to_page(page)

            print_info(view.summary())
            print_separator("-")
            items = board.page()
            if not items:
                typer.echo("No tasks found")
            for task in items:
                typer.echo(format_task_line(task))
            print_separator("-")
            pagination = board.pagination
            typer.echo(f"Page {pagination.current_page} of {pagination.total_pages}")

    asyncio.run(run())


def show(
    task_id: str = typer.Argument(..., help="Task ID"),
    api_url: ApiUrlOption = None,
) -> None:
    """Show every field of one task."""

    async def run() -> None:
        async with make_client(api_url) as api:
            try:
                task = await api.get_task(task_id)
            except TaskApiError as e:
                print_error(e.message)
                raise typer.Exit(1)
            print_task(task)

    asyncio.run(run())


def create(
    title: str = typer.Option(..., "--title", "-t", help="Task title"),
    due: str = typer.Option(..., "--due", "-d", help="Due date, e.g. 2025-03-15"),
    description: Optional[str] = typer.Option(None, "--description", help="Longer description"),
    priority: Optional[str] = typer.Option(None, "--priority", "-p", help="low, medium or high"),
    status: Optional[str] = typer.Option(None, "--status", "-s", help="todo, in-progress or done"),
    tags: Optional[str] = typer.Option(None, "--tags", help="Comma-separated tags"),
    assignee: Optional[str] = typer.Option(None, "--assignee", "-a", help="Who works on it"),
    api_url: ApiUrlOption = None,
) -> None:
    """Create a task.

    Example:
        taskboard create --title "Fix login" --due 2025-03-15 --tags "auth, bug"
    """
    form = TaskForm()
    _fill_form(
        form,
        title=title,
        due=due,
        description=description,
        priority=priority,
        status=status,
        tags=tags,
        assignee=assignee,
    )
    draft = _validated_draft(form)

    async def run() -> None:
        async with make_client(api_url) as api:
            task = exit_on_err(await TaskStore(api).create(draft))
            print_success(f"Created task {task.id}")
            typer.echo(format_task_line(task))

    asyncio.run(run())


def edit(
    task_id: str = typer.Argument(..., help="Task ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    due: Optional[str] = typer.Option(None, "--due", "-d", help="New due date"),
    description: Optional[str] = typer.Option(None, "--description", help="New description"),
    priority: Optional[str] = typer.Option(None, "--priority", "-p", help="low, medium or high"),
    status: Optional[str] = typer.Option(None, "--status", "-s", help="todo, in-progress or done"),
    tags: Optional[str] = typer.Option(None, "--tags", help="Comma-separated tags (replaces all)"),
    assignee: Optional[str] = typer.Option(None, "--assignee", "-a", help="New assignee"),
    api_url: ApiUrlOption = None,
) -> None:
    """Change some fields of a task. Fields not given are left alone.

    Example:
        taskboard edit 3f2a... --status done
    """

    async def run() -> None:
        async with make_client(api_url) as api:
            try:
                current = await api.get_task(task_id)
            except TaskApiError as e:
                print_error(e.message)
                raise typer.Exit(1)

            form = TaskForm(current)
            touched = _fill_form(
                form,
                title=title,
                due=due,
                description=description,
                priority=priority,
                status=status,
                tags=tags,
                assignee=assignee,
            )
            if not touched:
                print_error("Nothing to update. Pass at least one field option.")
                raise typer.Exit(1)
            draft = _validated_draft(form)

            patch = TaskPatch(**{field: getattr(draft, field) for field in touched})
            task = exit_on_err(await TaskStore(api).edit(task_id, patch))
            print_success(f"Updated task {task.id}")
            typer.echo(format_task_line(task))

    asyncio.run(run())


def delete(
    task_id: str = typer.Argument(..., help="Task ID"),
    api_url: ApiUrlOption = None,
) -> None:
    """Delete a task."""

    async def run() -> None:
        async with make_client(api_url) as api:
            exit_on_err(await TaskStore(api).remove(task_id))
            print_success(f"Deleted task {task_id}")

    asyncio.run(run())
