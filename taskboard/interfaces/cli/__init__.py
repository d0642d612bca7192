"""CLI interface for Taskboard using Typer.

Usage:
    taskboard serve                 # Run the API
    taskboard stats                 # Counts per status and recent tasks
    taskboard list --status todo    # List tasks
    taskboard create --title "Write docs" --due 2025-04-01
    taskboard edit ID --status done
    taskboard delete ID

The CLI is structured as:
- app: Main Typer application
- commands/: Command modules (server, task)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

from typing import Optional

import typer

from taskboard import __version__
from taskboard.interfaces.cli.commands import server, task

app = typer.Typer(
    name="taskboard",
    help="Create, list, filter, edit and delete tasks",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"taskboard version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Taskboard - a small task tracker with an HTTP API."""


# =============================================================================
# Register Commands
# =============================================================================

app.command("serve")(server.serve)
app.command("stats")(task.stats)
app.command("list")(task.list_tasks)
app.command("show")(task.show)
app.command("create")(task.create)
app.command("edit")(task.edit)
app.command("delete")(task.delete)


__all__ = ["app"]
