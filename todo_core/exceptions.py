"""Custom exceptions for Todo Core.

Every exception carries a human-readable message and an optional details
dict. The Flask error handlers in main.py map each class to its HTTP status.
"""


class TodoCoreError(Exception):
    """Base exception for all Todo Core errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(TodoCoreError):
    """Request data is missing or malformed (400)."""


class ConflictError(TodoCoreError):
    """Resource already exists, e.g. a duplicate email (400)."""


class AuthenticationError(TodoCoreError):
    """Missing, invalid or expired credentials (401)."""


class InvalidTokenError(AuthenticationError):
    """Token cannot be parsed or its signature does not match."""


class ExpiredTokenError(AuthenticationError):
    """Token was well-formed but is past its expiry."""


class ResourceNotFound(TodoCoreError):
    """Resource does not exist or is not owned by the requester (404)."""


class InternalError(TodoCoreError):
    """Unexpected failure (500)."""
