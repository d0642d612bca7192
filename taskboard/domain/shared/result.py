"""Result type for explicit error handling in task operations.

Operations that can fail in an expected way (validation, unknown ids, a
failed API round trip) return ``Ok(value)`` or ``Err(error)`` instead of
raising. Callers branch on the variant, so a failed request never has to be
inferred from shared state.

Example usage:
    >>> def parse_page(raw: str) -> Result[int, str]:
    ...     if not raw.isdigit():
    ...         return Err("page must be a number")
    ...     return Ok(int(raw))
    ...
    >>> result = parse_page("2")
    >>> if is_ok(result):
    ...     print(f"Page: {result.value}")
    Page: 2
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value of type E.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is successful."""
    return isinstance(result, Ok)


def map_result(result: Ok[T] | Err[E], fn: Callable[[T], U]) -> Ok[U] | Err[E]:
    """Apply a function to the value inside an Ok result.

    Args:
        result: The result to transform.
        fn: Function to apply to the Ok value.

    Returns:
        A new Result with the transformed value, or the original Err.
    """
    if isinstance(result, Ok):
        return Ok(fn(result.value))
    return result

