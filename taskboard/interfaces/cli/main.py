"""Entry point for the Taskboard CLI.

Usage:
    python -m taskboard.interfaces.cli.main

Or via installed entry point:
    taskboard <command>
"""

from taskboard.interfaces.cli import app


def main() -> None:
    """Run the Taskboard CLI application."""
    app()


if __name__ == "__main__":
    main()
