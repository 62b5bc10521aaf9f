"""Pydantic schemas for task input and output.

The API keeps the original field names (task, date, userId, createdAt);
internally the same values are description, due_date, user_id, created_at.
"""

from datetime import date, datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..db.models import Priority, Task
from ..utils import isodatetime

PRIORITY_MESSAGE = "Priority must be low, medium or high"


def _check_priority(value: Any) -> Any:
    if value is None or isinstance(value, Priority):
        return value
    if value not in [p.value for p in Priority]:
        raise ValueError(PRIORITY_MESSAGE)
    return value


def _parse_due_date(value: Any) -> Any:
    """Accept ISO dates and datetimes, keeping only the calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if value is None or isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("Invalid date format")
    try:
        return isodatetime.parse_date(value)
    except ValueError:
        raise ValueError("Invalid date format")


class TaskCreate(BaseModel):
    """Fields required to create a task."""

    missing_fields_message: ClassVar[str] = "Task, priority and date are required"

    model_config = ConfigDict(populate_by_name=True)

    description: str = Field(..., min_length=1, alias="task")
    priority: Priority
    due_date: date = Field(..., alias="date")

    @field_validator("priority", mode="before")
    @classmethod
    def check_priority(cls, v: Any) -> Any:
        return _check_priority(v)

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v: Any) -> Any:
        return _parse_due_date(v)


class TaskUpdate(BaseModel):
    """Partial task update; None means "leave unchanged"."""

    model_config = ConfigDict(populate_by_name=True)

    description: str | None = Field(default=None, min_length=1, alias="task")
    priority: Priority | None = None
    due_date: date | None = Field(default=None, alias="date")

    @field_validator("priority", mode="before")
    @classmethod
    def check_priority(cls, v: Any) -> Any:
        return _check_priority(v)

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v: Any) -> Any:
        return _parse_due_date(v)


class TodoResponse(BaseModel):
    """Task as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    description: str = Field(alias="task")
    priority: Priority
    due_date: date = Field(alias="date")
    completed: bool
    created_at: datetime = Field(alias="createdAt")

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return isodatetime.to_timestamp(value)

    @classmethod
    def from_task(cls, task: Task) -> "TodoResponse":
        return cls(
            id=task.id,
            user_id=task.user_id,
            description=task.description,
            priority=task.priority,
            due_date=task.due_date,
            completed=task.completed,
            created_at=task.created_at,
        )

    def to_json(self) -> dict[str, Any]:
        """Serialize with API field names."""
        return self.model_dump(mode="json", by_alias=True)
