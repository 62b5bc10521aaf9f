"""Task store operations.

IMPORT CONVENTION:
- Core accesses these through core.task property
- Task Service (tasks.service) validates input before calling in here

OWNERSHIP POLICY:
Every lookup is keyed on (owner_id, task_id). A task that exists but belongs
to someone else raises the same ResourceNotFound as a task that does not
exist, so non-owners cannot learn that an id is in use.
"""

import threading
from typing import Any

from ..exceptions import ResourceNotFound
from .models import Task


class TaskOperations:
    """Task record operations.

    Tasks are kept in insertion order. Each method holds the lock for its
    whole find-and-mutate unit and returns copies, never the stored record.
    """

    def __init__(self):
        self._tasks: dict[str, Task] = {}
        self._lock = threading.Lock()

    def add(self, task: Task) -> Task:
        """Store a new task.

        Raises:
            ValueError: If a task with the same ID already exists
        """
        with self._lock:
            if task.id in self._tasks:
                raise ValueError(f"Task '{task.id}' already exists")
            self._tasks[task.id] = task.model_copy()
        return task.model_copy()

    def list_by_owner(self, owner_id: str, completed: bool | None = None) -> list[Task]:
        """List tasks owned by a user, in creation order.

        Args:
            owner_id: The owning user's ID
            completed: If given, only tasks with this completion state
        """
        with self._lock:
            return [
                task.model_copy()
                for task in self._tasks.values()
                if task.user_id == owner_id
                and (completed is None or task.completed == completed)
            ]

    def get(self, owner_id: str, task_id: str) -> Task:
        """Get a task owned by owner_id.

        Raises:
            ResourceNotFound: If task_id doesn't exist or isn't owned by owner_id
        """
        with self._lock:
            return self._get_owned(owner_id, task_id).model_copy()

    def update(self, owner_id: str, task_id: str, changes: dict[str, Any]) -> Task:
        """Overwrite the given fields of an owned task.

        id, user_id and created_at are immutable and cannot be changed here.

        Raises:
            ResourceNotFound: If task_id doesn't exist or isn't owned by owner_id
            ValueError: If changes names an immutable or unknown field
        """
        forbidden = set(changes) & {"id", "user_id", "created_at"}
        unknown = set(changes) - set(Task.model_fields)
        if forbidden or unknown:
            raise ValueError(f"Cannot update fields: {sorted(forbidden | unknown)}")

        with self._lock:
            task = self._get_owned(owner_id, task_id)
            updated = task.model_copy(update=changes)
            self._tasks[task_id] = updated
            return updated.model_copy()

    def set_completed(self, owner_id: str, task_id: str, completed: bool | None = None) -> Task:
        """Set or flip the completion flag of an owned task.

        Args:
            completed: New value; None flips the current value

        Raises:
            ResourceNotFound: If task_id doesn't exist or isn't owned by owner_id
        """
        with self._lock:
            task = self._get_owned(owner_id, task_id)
            value = (not task.completed) if completed is None else completed
            updated = task.model_copy(update={"completed": value})
            self._tasks[task_id] = updated
            return updated.model_copy()

    def remove(self, owner_id: str, task_id: str) -> Task:
        """Delete an owned task and return it.

        Raises:
            ResourceNotFound: If task_id doesn't exist or isn't owned by owner_id
        """
        with self._lock:
            task = self._get_owned(owner_id, task_id)
            del self._tasks[task_id]
            return task

    def count(self) -> int:
        """Total number of stored tasks across all users."""
        with self._lock:
            return len(self._tasks)

    def _get_owned(self, owner_id: str, task_id: str) -> Task:
        # Caller must hold the lock
        task = self._tasks.get(task_id)
        if task is None or task.user_id != owner_id:
            raise ResourceNotFound(
                f"Todo '{task_id}' not found",
                {"todo_id": task_id}
            )
        return task
