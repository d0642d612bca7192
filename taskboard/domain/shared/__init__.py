"""Shared domain utilities for Taskboard.

Example usage:
    >>> from taskboard.domain.shared import Ok, Err, Result, is_ok
    >>>
    >>> def find_title(task_id: str) -> Result[str, str]:
    ...     if task_id == "missing":
    ...         return Err("Task not found")
    ...     return Ok("Write unit tests")
"""

from taskboard.domain.shared.result import (
    Err,
    Ok,
    Result,
    is_ok,
    map_result,
)

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "map_result",
]
