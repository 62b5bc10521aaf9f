"""Seed the in-memory stores with sample users and todos for development.

Enabled with SEED_DEMO_DATA=true. All sample users share the password
"password123". Todos are spread round-robin across the users with due dates
relative to today.
"""

import logging
from datetime import date, timedelta

from .models import Priority, Task
from . import Core

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

SAMPLE_USERS = [
    ("John Doe", "john@example.com"),
    ("Jane Smith", "jane@example.com"),
    ("Bob Johnson", "bob@example.com"),
    ("Alice Brown", "alice@example.com"),
    ("Charlie Wilson", "charlie@example.com"),
]

# (description, priority, days from today, completed)
SAMPLE_TODOS = [
    ("Complete project documentation", Priority.HIGH, 0, False),
    ("Review code changes", Priority.MEDIUM, 0, False),
    ("Update dependencies", Priority.LOW, 0, True),
    ("Fix authentication bug", Priority.HIGH, 0, False),
    ("Write unit tests", Priority.MEDIUM, 0, True),
    ("Prepare presentation slides", Priority.HIGH, 1, False),
    ("Schedule team meeting", Priority.MEDIUM, 1, False),
    ("Backup database", Priority.LOW, 1, False),
    ("Plan next sprint", Priority.HIGH, 2, False),
    ("Research new technologies", Priority.MEDIUM, 2, False),
    ("Update security policies", Priority.HIGH, 3, False),
    ("Train new team members", Priority.LOW, 4, False),
    ("Setup development environment", Priority.HIGH, -1, True),
    ("Create initial project structure", Priority.HIGH, -1, True),
    ("Design database schema", Priority.MEDIUM, -2, True),
    ("Write API documentation", Priority.LOW, -3, True),
]


def seed_demo_data(core: Core, today: date | None = None) -> int:
    """Create sample users and todos if no users exist yet.

    Args:
        core: Core whose stores are seeded
        today: Reference date for due dates (default: today)

    Returns:
        Number of todos created (0 if the stores were not empty)
    """
    if core.user.count() > 0:
        logger.info("Users already present, skipping demo seed")
        return 0

    today = today or date.today()
    users = [core.user.create(name, email, DEMO_PASSWORD) for name, email in SAMPLE_USERS]

    for index, (description, priority, offset, completed) in enumerate(SAMPLE_TODOS):
        owner = users[index % len(users)]
        core.task.add(Task(
            user_id=owner.id,
            description=description,
            priority=priority,
            due_date=today + timedelta(days=offset),
            completed=completed,
        ))

    logger.info(f"Seeded {len(users)} demo users and {len(SAMPLE_TODOS)} todos")
    return len(SAMPLE_TODOS)
