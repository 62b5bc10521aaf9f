"""Authentication Pydantic schemas for API validation."""

from .auth import (
    MIN_PASSWORD_LENGTH,
    AuthResponse,
    TokenPayload,
    UserBase,
    UserLogin,
    UserRegister,
    UserResponse,
)

__all__ = [
    "MIN_PASSWORD_LENGTH",
    "AuthResponse",
    "TokenPayload",
    "UserBase",
    "UserLogin",
    "UserRegister",
    "UserResponse",
]
