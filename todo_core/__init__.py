"""Todo Core: a multi-user to-do list service with bearer token auth."""

__version__ = "1.0.0"
