"""In-memory data layer for Todo Core.

This module provides the Core container that owns every piece of shared
state in the service.

ARCHITECTURE:
- Core is constructed once per Flask app (see main.create_app) and stored in
  app.extensions, so there are no module-level collections and each app
  (and each test) starts with empty stores
- Each record type gets an encapsulated operations class:
    core.user  - credential store (UserOperations)
    core.task  - task store (TaskOperations)
- core.token is the token service; it owns only the signing secret

Request handlers reach the Core of the current app through get_core():

    core = get_core()
    user = core.user.find_by_email("a@x.com")
    tasks = core.task.list_by_owner(user.id)
"""

from datetime import timedelta

from flask import current_app

from ..auth.token import TokenService
from ..config import Settings
from .task import TaskOperations
from .user import UserOperations

EXTENSION_KEY = "todo_core"


class Core:
    """Container for the stores and token service of one app instance."""

    def __init__(self, config: Settings):
        """Build empty stores and a token service from settings.

        Args:
            config: Settings supplying the bcrypt work factor and JWT secret
        """
        self._user_ops = UserOperations(rounds=config.bcrypt_work_factor)
        self._task_ops = TaskOperations()
        self._token_service = TokenService(
            secret_key=config.jwt_secret_key,
            expiry=timedelta(hours=config.jwt_expiry_hours),
        )

    @property
    def user(self) -> UserOperations:
        """Credential store."""
        return self._user_ops

    @property
    def task(self) -> TaskOperations:
        """Task store."""
        return self._task_ops

    @property
    def token(self) -> TokenService:
        """Token issue and verification."""
        return self._token_service


def get_core() -> Core:
    """Get the Core of the current Flask app.

    Raises:
        RuntimeError: If called outside an app context or the app was not
            built with create_app()
    """
    try:
        return current_app.extensions[EXTENSION_KEY]
    except KeyError:
        raise RuntimeError(
            "Todo Core is not initialized on this app. Use main.create_app()."
        ) from None
