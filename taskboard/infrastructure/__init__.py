"""Infrastructure layer for Taskboard.

Adapters the application layer depends on:
- storage: the in-memory task repository
"""

from taskboard.infrastructure.storage import InMemoryTaskRepository

__all__ = ["InMemoryTaskRepository"]
