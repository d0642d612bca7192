"""Server CLI command."""

from typing import Optional

import typer
import uvicorn

from taskboard.config import get_settings
from taskboard.interfaces.api import create_app
from taskboard.interfaces.cli.common import print_info
from taskboard.logging_setup import setup_logging


def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: Optional[int] = typer.Option(None, "--port", help="Port (default from config)"),
    no_seed: bool = typer.Option(False, "--no-seed", help="Start with an empty task list"),
) -> None:
    """Run the Taskboard API.

    Tasks are kept in memory and are lost when the server stops.

    Example:
        taskboard serve --port 8080 --no-seed
    """
    settings = get_settings()
    changes: dict[str, object] = {}
    if host is not None:
        changes["host"] = host
    if port is not None:
        changes["port"] = port
    if no_seed:
        changes["seed"] = False
    settings = settings.model_copy(update=changes)

    setup_logging(settings.log_level)
    print_info(f"Taskboard API on http://{settings.host}:{settings.port}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
