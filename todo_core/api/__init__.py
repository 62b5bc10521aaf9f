"""HTTP API for Todo Core.

- todos: /todos blueprint (all routes behind the auth middleware)
- validation: request body parsing helpers shared by every blueprint
"""
