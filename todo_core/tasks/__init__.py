"""Task service and schemas."""

from . import schemas, service

__all__ = ["schemas", "service"]
