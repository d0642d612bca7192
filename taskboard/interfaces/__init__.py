"""Interfaces layer for Taskboard.

This layer contains adapters for external interactions:
- API: REST API using FastAPI (taskboard.interfaces.api)
- CLI: Command-line interface using Typer (taskboard.interfaces.cli)

The interfaces layer is responsible for:
- Accepting user input and validating it
- Calling application services or the client pipeline
- Formatting output for the user
"""
