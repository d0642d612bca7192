"""Field-level validation rules for tasks.

These are the predicates; the API and the form helper each word their own
error messages around them.
"""

from datetime import UTC, date, datetime

from .models import PRIORITY_VALUES, STATUS_VALUES

_OLDEST = datetime.min.replace(tzinfo=UTC)


def is_blank(value: str | None) -> bool:
    """True for None, the empty string, or whitespace only."""
    return value is None or value.strip() == ""


def parse_date(value: str | None) -> date | None:
    """Parse an ISO-8601 date or datetime string into a calendar date.

    Returns None when the value is missing or does not parse.
    """
    if is_blank(value):
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def is_valid_date(value: str | None) -> bool:
    return parse_date(value) is not None


def is_valid_priority(value: str | None) -> bool:
    return value in PRIORITY_VALUES


def is_valid_status(value: str | None) -> bool:
    return value in STATUS_VALUES


def parse_timestamp(value: str) -> datetime:
    """Parse a createdAt timestamp for ordering.

    Unparseable values sort as the oldest possible time.
    """
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return _OLDEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
