"""User credential store.

IMPORT CONVENTION:
- Core accesses these through core.user property
- NO direct import needed when using Core API

Users are held in memory for the lifetime of the process. The store owns
password hashing: raw passwords are hashed on the way in and never kept.
"""

import logging
import threading

from ..exceptions import ConflictError
from ..utils import secret
from .models import User

logger = logging.getLogger(__name__)

DUMMY_PASSWORD = "dummy-password-for-timing"


class UserOperations:
    """User record operations.

    Every operation that reads and writes the collection holds the lock for
    its whole duration, so the email uniqueness check and the insert are one
    atomic unit.
    """

    def __init__(self, rounds: int = 10):
        """Initialize an empty user store.

        Args:
            rounds: Bcrypt work factor used for new password hashes
        """
        self._rounds = rounds
        self._users: dict[str, User] = {}
        self._by_email: dict[str, str] = {}
        self._lock = threading.Lock()
        # Built up front: an unknown-email login only runs a bcrypt check
        self._dummy_hash = secret.hash_password(DUMMY_PASSWORD, rounds=rounds)

    def create(self, name: str, email: str, raw_password: str) -> User:
        """Register a new user with a hashed password.

        Args:
            name: Display name
            email: Email address, unique across users (exact match)
            raw_password: Plain text password, discarded after hashing

        Returns:
            The created User

        Raises:
            ConflictError: If the email is already registered
        """
        # Hash outside the lock; it is the slow part
        password_hash = secret.hash_password(raw_password, rounds=self._rounds)

        with self._lock:
            if email in self._by_email:
                raise ConflictError("User already exists", {"email": email})

            user = User(name=name, email=email, password_hash=password_hash)
            self._users[user.id] = user
            self._by_email[email] = user.id

        logger.debug(f"User stored: {user.id}")
        return user.model_copy()

    def find_by_email(self, email: str) -> User | None:
        """Get user by exact email, or None."""
        with self._lock:
            user_id = self._by_email.get(email)
            user = self._users.get(user_id) if user_id else None
            return user.model_copy() if user else None

    def find_by_id(self, user_id: str) -> User | None:
        """Get user by ID, or None."""
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user else None

    def verify_password(self, user: User | None, raw_password: str) -> bool:
        """Check a password for a user.

        When user is None a dummy hash is checked instead, so a failed lookup
        costs the same time as a wrong password.

        Returns:
            True only if user exists and the password matches
        """
        if user is None:
            secret.verify_password(raw_password, self._dummy_hash)
            return False
        return secret.verify_password(raw_password, user.password_hash)

    def count(self) -> int:
        """Number of registered users."""
        with self._lock:
            return len(self._users)
