"""Sample tasks a fresh store starts with."""

from .models import Task, TaskPriority, TaskStatus, new_task_id, now_timestamp

_SAMPLES: list[dict] = [
    {
        "title": "Design the homepage UI",
        "description": "Create wireframes and mockups for the landing page",
        "priority": TaskPriority.HIGH,
        "status": TaskStatus.IN_PROGRESS,
        "due_date": "2025-03-15",
        "tags": ["design", "frontend"],
        "assigned_to": "Alice",
    },
    {
        "title": "Set up database schema",
        "description": "Design and implement the PostgreSQL database schema",
        "priority": TaskPriority.HIGH,
        "status": TaskStatus.TODO,
        "due_date": "2025-03-10",
        "tags": ["backend", "database"],
        "assigned_to": "Bob",
    },
    {
        "title": "Write unit tests",
        "description": "Add tests for all utility functions and components",
        "priority": TaskPriority.MEDIUM,
        "status": TaskStatus.TODO,
        "due_date": "2025-03-20",
        "tags": ["testing"],
        "assigned_to": "Charlie",
    },
    {
        "title": "Deploy to staging server",
        "description": "Push latest build to the staging environment",
        "priority": TaskPriority.LOW,
        "status": TaskStatus.DONE,
        "due_date": "2025-02-28",
        "tags": ["devops"],
        "assigned_to": "Alice",
    },
    {
        "title": "Fix authentication bug",
        "description": "Users are being logged out unexpectedly after 5 minutes",
        "priority": TaskPriority.HIGH,
        "status": TaskStatus.IN_PROGRESS,
        "due_date": "2025-03-05",
        "tags": ["bug", "auth"],
        "assigned_to": "Bob",
    },
]


def seed_tasks() -> list[Task]:
    """Build the sample tasks, each with a fresh id and creation time."""
    return [
        Task(id=new_task_id(), created_at=now_timestamp(), **sample) for sample in _SAMPLES
    ]
