"""Task service: validated, owner-scoped task operations.

Every function takes the caller's user ID and passes it down to the task
store, which folds the ownership check into the lookup. Tasks belonging to
other users are therefore indistinguishable from tasks that do not exist.

Update validation:
The original API validated priority and date only on create and accepted
anything on update. Here update applies the same rules to every field it is
given, so a task can never hold a priority outside low/medium/high or an
unparseable date.
"""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..api.validation import error_message, format_errors
from ..db.models import Task
from ..db.task import TaskOperations
from ..exceptions import ValidationError
from .schemas import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


def _validate(model, description: Any, priority: Any, due_date: Any):
    # None means "not given"
    fields = {"task": description, "priority": priority, "date": due_date}
    try:
        return model.model_validate(
            {key: value for key, value in fields.items() if value is not None}
        )
    except PydanticValidationError as e:
        raise ValidationError(error_message(model, e), {"errors": format_errors(e)})


def create_task(
    store: TaskOperations,
    owner_id: str,
    description: Any,
    priority: Any,
    due_date: Any
) -> Task:
    """Create a task for owner_id.

    Args:
        store: Task store
        owner_id: ID of the authenticated user
        description: Task text (non-empty)
        priority: "low", "medium" or "high"
        due_date: ISO 8601 date or datetime string

    Returns:
        The created task, not completed

    Raises:
        ValidationError: If a field is missing, priority is not in the enum,
            or due_date is not a valid calendar date
    """
    data = _validate(TaskCreate, description, priority, due_date)

    task = store.add(Task(
        user_id=owner_id,
        description=data.description,
        priority=data.priority,
        due_date=data.due_date,
    ))
    logger.info(f"Todo {task.id} created for user {owner_id}")
    return task


def list_tasks(store: TaskOperations, owner_id: str) -> list[Task]:
    """All tasks of owner_id in creation order."""
    return store.list_by_owner(owner_id)


def list_completed_tasks(store: TaskOperations, owner_id: str) -> list[Task]:
    """Completed tasks of owner_id in creation order."""
    return store.list_by_owner(owner_id, completed=True)


def toggle_complete(
    store: TaskOperations,
    owner_id: str,
    task_id: str,
    completed: Any = None
) -> Task:
    """Set or flip a task's completion flag.

    Args:
        completed: True/False to set explicitly; None flips the current value

    Raises:
        ValidationError: If completed is given but is not a boolean
        ResourceNotFound: If the task doesn't exist or isn't owned by owner_id
    """
    if completed is not None and not isinstance(completed, bool):
        raise ValidationError(
            "completed must be a boolean",
            {"completed": repr(completed)}
        )
    return store.set_completed(owner_id, task_id, completed)


def update_task(
    store: TaskOperations,
    owner_id: str,
    task_id: str,
    description: Any = None,
    priority: Any = None,
    due_date: Any = None
) -> Task:
    """Overwrite the provided fields of a task; None leaves a field unchanged.

    Raises:
        ValidationError: If a provided field is invalid
        ResourceNotFound: If the task doesn't exist or isn't owned by owner_id
    """
    data = _validate(TaskUpdate, description, priority, due_date)

    changes = data.model_dump(exclude_none=True)
    if not changes:
        # Still enforce the ownership check
        return store.get(owner_id, task_id)
    return store.update(owner_id, task_id, changes)


def delete_task(store: TaskOperations, owner_id: str, task_id: str) -> Task:
    """Remove a task and return it.

    Raises:
        ResourceNotFound: If the task doesn't exist or isn't owned by owner_id
    """
    task = store.remove(owner_id, task_id)
    logger.info(f"Todo {task_id} deleted for user {owner_id}")
    return task
