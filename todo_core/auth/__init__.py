"""Authentication module for Todo Core.

This module provides authentication and authorization functionality:
- Schema validation for auth operations
- JWT token generation and validation
- Registration and credential checks
- Authentication middleware for protected endpoints

Auth endpoints:
- POST /auth/register - Create account and return JWT token
- POST /auth/login - Authenticate and return JWT token
- GET /auth/me - Get current user info
"""

from . import schemas, token

__all__ = ["schemas", "token"]
