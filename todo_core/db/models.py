"""Record types held by the in-memory stores.

These are internal records, not API schemas. User carries the password
hash, so it must never be serialized directly into a response; convert to
UserResponse (auth.schemas) or TodoResponse (api.schemas) first.
"""

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from ..utils import isodatetime, uid


class Priority(StrEnum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class User(BaseModel):
    """Registered user."""

    id: str = Field(default_factory=uid.generate_uuid)
    name: str
    email: str
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=isodatetime.utcnow)


class Task(BaseModel):
    """To-do item owned by exactly one user."""

    id: str = Field(default_factory=uid.generate_uuid)
    user_id: str
    description: str
    priority: Priority
    due_date: date
    completed: bool = False
    created_at: datetime = Field(default_factory=isodatetime.utcnow)
