"""Utility functions for Todo Core.

Import convention: use module-level imports for clarity.

    from utils import isodatetime, secret, uid
    created = isodatetime.utcnow()
    hashed = secret.hash_password("secret1", rounds=10)
    task_id = uid.generate_uuid()
"""

from . import isodatetime, secret, uid

__all__ = ["isodatetime", "secret", "uid"]
