"""Repository implementations for tasks.

The task repository keeps every record in process memory. One instance is
created when the app starts and handed to the request handlers; restarting
the process resets it.
"""

import logging
from collections.abc import Iterable

from taskboard.domain.shared.result import Err, Ok, Result
from taskboard.domain.task.models import Task, TaskPatch
from taskboard.domain.task.seed import seed_tasks

logger = logging.getLogger(__name__)


class InMemoryTaskRepository:
    """Repository for task records.

    Tasks are kept in insertion order. The repository does not sort; ordering
    by recency is up to whoever renders the list.

    No locking: handlers run on a single event loop and none of these
    methods await.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        """Initialize the repository.

        Args:
            tasks: Initial records. Starts empty if not provided.
        """
        self._tasks: list[Task] = list(tasks or [])

    @classmethod
    def with_seed_data(cls) -> "InMemoryTaskRepository":
        """Create a repository holding the sample tasks."""
        repo = cls(seed_tasks())
        logger.info(f"Seeded task store with {repo.count()} sample tasks")
        return repo

    def list_all(self) -> list[Task]:
        """All tasks, in insertion order."""
        return list(self._tasks)

    def count(self) -> int:
        return len(self._tasks)

    def find_by_id(self, task_id: str) -> Task | None:
        """Get a task by ID, or None if there is none."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, task: Task) -> None:
        """Append a task."""
        self._tasks.append(task)
        logger.debug(f"Task added id={task.id} title={task.title!r}")

    def update(self, task_id: str, patch: TaskPatch) -> Result[Task, str]:
        """Merge a patch into an existing task.

        Args:
            task_id: ID of the task to update.
            patch: Fields to overwrite. Unset fields keep their values.

        Returns:
            Ok(Task) with the merged record, Err(str) if no task has this ID.
        """
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                updated = patch.apply(task)
                self._tasks[index] = updated
                logger.debug(f"Task updated id={task_id} fields={sorted(patch.changes())}")
                return Ok(updated)
        return Err("Task not found")

    def delete(self, task_id: str) -> bool:
        """Remove a task.

        Returns:
            True if a task was removed, False if no task had this ID.
        """
        before = len(self._tasks)
        self._tasks = [task for task in self._tasks if task.id != task_id]
        removed = len(self._tasks) < before
        if removed:
            logger.debug(f"Task deleted id={task_id}")
        return removed
