"""Storage infrastructure for Taskboard."""

from taskboard.infrastructure.storage.repositories import InMemoryTaskRepository

__all__ = ["InMemoryTaskRepository"]
