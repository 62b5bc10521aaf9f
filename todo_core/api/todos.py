"""Todo endpoints for Todo Core API.

This module implements RESTful endpoints for a user's own todos:
- POST   /todos                 - Create todo
- GET    /todos                 - List the caller's todos
- GET    /todos/completed       - List the caller's completed todos
- PATCH  /todos/<id>/complete   - Set or toggle completion
- PUT    /todos/<id>            - Partial update
- DELETE /todos/<id>            - Delete todo

Every route in this blueprint runs behind the authenticate() before_request
hook; handlers read the caller from g.user_id and never see other users'
todos. A todo owned by someone else answers 404, same as a missing one.
"""

from flask import Blueprint, g, jsonify, request

from ..auth.decorators import _authenticate_request
from ..db import get_core
from ..tasks import service
from ..tasks.schemas import TodoResponse
from .validation import get_json_body

# Create Blueprint
todos_bp = Blueprint("todos", __name__, url_prefix="/todos")


# ============================================================================
# Authentication Middleware (blueprint-level)
# ============================================================================


@todos_bp.before_request
def authenticate():
    """
    Require a valid bearer token for every todo endpoint.

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    # CORS preflight carries no credentials
    if request.method == "OPTIONS":
        return
    _authenticate_request()


def _todo_json(task) -> dict:
    return TodoResponse.from_task(task).to_json()


@todos_bp.post("", strict_slashes=False)
def create_todo():
    """
    Create a new todo for the caller.

    Request Body:
        - task: str (required)
        - priority: "low" | "medium" | "high" (required)
        - date: ISO 8601 date (required)

    Returns:
        201: {message, todo}
        400: Missing field, invalid priority or invalid date
    """
    body = get_json_body()
    task = service.create_task(
        get_core().task,
        g.user_id,
        body.get("task"),
        body.get("priority"),
        body.get("date"),
    )
    return jsonify({"message": "Todo created successfully", "todo": _todo_json(task)}), 201


@todos_bp.get("", strict_slashes=False)
def list_todos():
    """
    List the caller's todos in creation order.

    Returns:
        200: {todos: [...]}
    """
    tasks = service.list_tasks(get_core().task, g.user_id)
    return jsonify({"todos": [_todo_json(t) for t in tasks]})


@todos_bp.get("/completed")
def list_completed_todos():
    """
    List the caller's completed todos.

    Returns:
        200: {todos: [...]}
    """
    tasks = service.list_completed_tasks(get_core().task, g.user_id)
    return jsonify({"todos": [_todo_json(t) for t in tasks]})


@todos_bp.patch("/<todo_id>/complete")
def complete_todo(todo_id: str):
    """
    Mark a todo complete or incomplete.

    Request Body (optional):
        - completed: bool. Omitted or null flips the current value.

    Returns:
        200: {message, todo}
        400: completed is not a boolean
        404: Todo not found
    """
    body = get_json_body()
    task = service.toggle_complete(
        get_core().task, g.user_id, todo_id, body.get("completed")
    )
    return jsonify({"message": "Todo updated", "todo": _todo_json(task)})


@todos_bp.put("/<todo_id>")
def update_todo(todo_id: str):
    """
    Update a todo. Only provided fields change.

    Request Body (all optional):
        - task: str
        - priority: "low" | "medium" | "high"
        - date: ISO 8601 date

    Returns:
        200: {message, todo}
        400: A provided field is invalid
        404: Todo not found
    """
    body = get_json_body()
    task = service.update_task(
        get_core().task,
        g.user_id,
        todo_id,
        description=body.get("task"),
        priority=body.get("priority"),
        due_date=body.get("date"),
    )
    return jsonify({"message": "Todo updated", "todo": _todo_json(task)})


@todos_bp.delete("/<todo_id>")
def delete_todo(todo_id: str):
    """
    Delete a todo.

    Returns:
        200: {message, todo} with the deleted todo
        404: Todo not found
    """
    task = service.delete_task(get_core().task, g.user_id, todo_id)
    return jsonify({"message": "Todo deleted", "todo": _todo_json(task)})
