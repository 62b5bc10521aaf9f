"""JWT token service.

Tokens are stateless: verification checks the signature and expiry and never
consults a session table. The consequence is that there is no revocation; a
leaked token stays valid until it expires. TokenService is a class so a
revocation list or key rotation can be added here without touching callers.

Claims:
- sub: user ID
- email: user email at issuance
- iat: issued-at (unix seconds)
- exp: expiry (unix seconds)
"""

from datetime import timedelta
from typing import Any, Protocol

import jwt

from ..exceptions import ExpiredTokenError, InvalidTokenError
from ..utils import isodatetime
from .schemas import TokenPayload

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


class TokenSubject(Protocol):
    """Anything with an id and email can be issued a token."""

    id: str
    email: str


class TokenService:
    """Issues and verifies signed access tokens."""

    def __init__(self, secret_key: str, expiry: timedelta = timedelta(hours=24)):
        """
        Args:
            secret_key: HMAC signing secret, fixed for the life of the service
            expiry: Lifetime of issued tokens
        """
        self._secret_key = secret_key
        self._expiry = expiry

    @property
    def expiry(self) -> timedelta:
        return self._expiry

    def issue(self, user: TokenSubject) -> str:
        """Generate an access token for a user."""
        now = isodatetime.now_unix()
        payload = {
            "sub": user.id,
            "email": user.email,
            "iat": now,
            "exp": now + int(self._expiry.total_seconds()),
        }
        return jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)

    def verify(self, token: str) -> TokenPayload:
        """Validate a token and return its claims.

        Raises:
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the token is malformed, has a bad signature,
                uses another algorithm, or lacks a required claim
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError("Token has expired", {"code": "token_expired"})
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}", {"code": "invalid_token"})

        return TokenPayload(**payload)


def decode_token_no_validation(token: str) -> dict[str, Any]:
    """Decode token claims WITHOUT checking signature or expiry.

    For logging only. Never trust the result for authorization.

    Raises:
        jwt.DecodeError: If the token is not structurally a JWT
    """
    return jwt.decode(token, options={"verify_signature": False, "verify_exp": False})
