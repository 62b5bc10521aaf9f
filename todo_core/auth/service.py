"""Authentication service: registration and credential checks.

Thin layer over the credential store that the auth endpoints call. Keeps the
rules about what a failed login may reveal in one place.
"""

import logging

from ..db import Core
from ..db.models import User
from .schemas import UserRegister

logger = logging.getLogger(__name__)


def register_user(core: Core, data: UserRegister) -> User:
    """Create a user from a validated registration request.

    Raises:
        ConflictError: If the email is already registered
    """
    user = core.user.create(data.name, data.email, data.password)
    logger.info(f"User registered: {user.id}")
    return user


def verify_credentials(core: Core, email: str, password: str) -> User | None:
    """Return the user if email and password match, else None.

    Unknown emails and wrong passwords both return None after a full bcrypt
    check, so neither the result nor the timing says which one failed.
    """
    user = core.user.find_by_email(email)
    if not core.user.verify_password(user, password):
        return None
    return user


def get_user_by_id(core: Core, user_id: str) -> User | None:
    """Look up a user by ID."""
    return core.user.find_by_id(user_id)
