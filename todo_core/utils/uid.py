"""ID generation for users and tasks.

Every record ID in the service comes from generate_uuid(); nothing else
should import uuid4.
"""

from uuid import uuid4


def generate_uuid() -> str:
    """Random UUID v4 string, used as an opaque record ID."""
    return str(uuid4())
