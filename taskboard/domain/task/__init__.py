"""Task domain - the task record, its validation rules and list filtering.

All exports are pure (no I/O, no side effects).

Key Types:
    Task - A unit of work
    TaskDraft - Payload for creating a task
    TaskPatch - Partial update (cannot touch id or createdAt)
    TaskFilters - Status / priority / search view filters
    TaskPriority, TaskStatus - Allowed enum values

Filtering Functions:
    filter_tasks - AND-combined status, priority and search filters
    sort_newest_first - Order by createdAt descending
    select_visible - Filter then sort
    is_overdue - Not done and due before a given day
"""

from .filtering import (
    all_of,
    filter_tasks,
    has_priority,
    has_status,
    is_overdue,
    matches_search,
    select_visible,
    sort_newest_first,
)
from .models import (
    ALL,
    DEFAULT_FILTERS,
    PRIORITY_VALUES,
    STATUS_VALUES,
    Task,
    TaskDraft,
    TaskFilters,
    TaskPatch,
    TaskPriority,
    TaskStatus,
    new_task_id,
    now_timestamp,
)
from .seed import seed_tasks
from .validation import (
    is_blank,
    is_valid_date,
    is_valid_priority,
    is_valid_status,
    parse_date,
    parse_timestamp,
)

__all__ = [
    # Models
    "ALL",
    "DEFAULT_FILTERS",
    "PRIORITY_VALUES",
    "STATUS_VALUES",
    "Task",
    "TaskDraft",
    "TaskFilters",
    "TaskPatch",
    "TaskPriority",
    "TaskStatus",
    "new_task_id",
    "now_timestamp",
    "seed_tasks",
    # Validation
    "is_blank",
    "is_valid_date",
    "is_valid_priority",
    "is_valid_status",
    "parse_date",
    "parse_timestamp",
    # Filtering
    "all_of",
    "filter_tasks",
    "has_priority",
    "has_status",
    "is_overdue",
    "matches_search",
    "select_visible",
    "sort_newest_first",
]
