"""Taskboard CLI.

Re-exports the app from taskboard.interfaces.cli so ``python -m taskboard.cli``
works.
"""

from taskboard.interfaces.cli import app
from taskboard.interfaces.cli.main import main

__all__ = ["app", "main"]

if __name__ == "__main__":
    main()
