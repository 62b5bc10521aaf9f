"""Authentication decorators for protected endpoints.

This module provides the single authorization checkpoint of the service:
- _authenticate_request() - shared logic, used as before_request by the
  todos blueprint
- @auth_required - the same check for individual routes

On success the authenticated user is stored in flask.g:
- g.user: User record of the caller
- g.user_id: the caller's ID
"""

import logging
from functools import wraps

import jwt
from flask import g, request

from ..db import get_core
from ..exceptions import AuthenticationError
from . import service
from .token import decode_token_no_validation

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


# ============================================================================
# Shared Authentication Logic
# ============================================================================


def _extract_bearer_token() -> str | None:
    """Get the token from an 'Authorization: Bearer <token>' header, if any."""
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith(BEARER_PREFIX):
        return None
    token_str = auth_header[len(BEARER_PREFIX):].strip()
    return token_str or None


def _claimed_subject(token_str: str) -> str | None:
    """The unverified sub claim of a token, for log lines only."""
    try:
        return decode_token_no_validation(token_str).get("sub")
    except jwt.PyJWTError:
        return None


def _authenticate_request():
    """
    Shared authentication logic for requests.

    Resolves the bearer token to a user and stores it in flask.g.

    Raises:
        AuthenticationError: "Access token required" if no bearer token was
            sent; "Invalid or expired token" if verification fails or the
            token's user no longer exists. The precise reason is only logged.
    """
    token_str = _extract_bearer_token()
    if token_str is None:
        logger.warning(f"Unauthenticated request to protected endpoint: {request.path}")
        raise AuthenticationError("Access token required", {"code": "missing_auth"})

    core = get_core()
    try:
        payload = core.token.verify(token_str)
    except AuthenticationError as e:
        logger.warning(
            f"Rejected token on {request.path} "
            f"(claimed sub: {_claimed_subject(token_str)}): {e.message}"
        )
        raise AuthenticationError("Invalid or expired token", {"code": "invalid_token"})

    user = service.get_user_by_id(core, payload.sub)
    if user is None:
        logger.warning(f"Token for unknown user {payload.sub} on {request.path}")
        raise AuthenticationError("Invalid or expired token", {"code": "invalid_token"})

    g.user = user
    g.user_id = user.id
    logger.debug(f"Authenticated user {user.id}")


# ============================================================================
# Auth Required Decorator
# ============================================================================


def auth_required(f):
    """
    Decorator to require a valid bearer token for endpoint access.

    Example:
    ```python
    @auth_required
    def protected_endpoint():
        user_id = g.user_id
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        _authenticate_request()
        return f(*args, **kwargs)

    return wrapper
