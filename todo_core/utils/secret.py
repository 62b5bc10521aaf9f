"""Password hashing utilities.

All bcrypt usage is centralized here. Bcrypt only considers the first
72 bytes of a password, and current releases reject longer input outright,
so callers validate length before hashing.
"""

import bcrypt

MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a fresh salt.

    Args:
        password: Plain text password
        rounds: Bcrypt work factor (log2 of iterations)

    Returns:
        Bcrypt hash string (60 characters)
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash in constant time."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Over-long password or corrupt hash
        return False
