"""CLI command groups for Taskboard.

- server: run the API (serve)
- task: stats, list, show, create, edit and delete tasks through the API

Modules hold plain command functions; the main app registers them by name.
"""

from taskboard.interfaces.cli.commands import server, task

__all__ = ["server", "task"]
