"""Authentication API endpoints for Todo Core.

These endpoints handle user authentication and return JSON responses:
- POST /auth/register - Create account and return a token
- POST /auth/login    - Authenticate and return a token
- GET  /auth/me       - Current user info (requires bearer token)

Register and login are public; they talk to the credential store and the
token service directly rather than passing through the auth middleware.
"""

import logging

from flask import Blueprint, g, jsonify

from ..api.validation import validate_request
from ..db import get_core
from ..exceptions import ValidationError
from . import service
from .decorators import auth_required
from .schemas import AuthResponse, UserLogin, UserRegister, UserResponse

logger = logging.getLogger(__name__)


# Create blueprint
auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


@auth_bp.post("/register")
@validate_request
def register(data: UserRegister):
    """
    Register a new user and return an access token.

    Example request:
    ```json
    {
        "name": "A",
        "email": "a@x.com",
        "password": "secret1",
        "confirmPassword": "secret1"
    }
    ```

    Returns:
        201: {message, user: {id, name, email}, token}
        400: Missing fields, password mismatch, password too short,
             or email already registered
    """
    core = get_core()
    user = service.register_user(core, data)
    access_token = core.token.issue(user)

    return jsonify(
        AuthResponse(
            message="User registered successfully",
            user=UserResponse.model_validate(user),
            token=access_token
        ).model_dump()
    ), 201


@auth_bp.post("/login")
@validate_request
def login(data: UserLogin):
    """
    Authenticate a user and return an access token.

    Failure is always the same generic "Invalid credentials", whether the
    email is unknown or the password is wrong.

    Returns:
        200: {message, user: {id, name, email}, token}
        400: Missing fields or invalid credentials
    """
    core = get_core()
    user = service.verify_credentials(core, data.email, data.password)
    if user is None:
        logger.warning("Failed login attempt")
        raise ValidationError("Invalid credentials")

    access_token = core.token.issue(user)
    logger.info(f"Successful login: {user.id}")

    return jsonify(
        AuthResponse(
            message="Login successful",
            user=UserResponse.model_validate(user),
            token=access_token
        ).model_dump()
    ), 200


@auth_bp.get("/me")
@auth_required
def get_current_user():
    """
    Get the authenticated user's public profile.

    Returns:
        200: {user: {id, name, email}}
        401: Missing, invalid or expired token
    """
    return jsonify({"user": UserResponse.model_validate(g.user).model_dump()}), 200
