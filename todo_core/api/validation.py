"""Request validation helpers.

The @validate_request decorator parses the JSON body (or form data) into the
Pydantic model named by the view's annotated parameter and passes it in.
Pydantic errors become ValidationError (400): the message summarizes the
first problem and the full error list goes in details.

    @bp.post("/login")
    @validate_request
    def login(data: UserLogin):
        ...

Path parameters pass through untouched:

    @bp.put("/<todo_id>")
    @validate_request
    def update(todo_id: str, data: SomeUpdate):
        ...
"""

import inspect
from functools import wraps
from typing import Any

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

VALUE_ERROR_PREFIX = "Value error, "


def get_json_body() -> dict[str, Any]:
    """Get the request body as a dict.

    Missing or unparseable bodies count as empty. Form data is accepted for
    HTML form posts.

    Raises:
        ValidationError: If the body is JSON but not an object
    """
    payload = request.get_json(silent=True)
    if payload is None:
        return request.form.to_dict() if request.form else {}
    if not isinstance(payload, dict):
        raise ValidationError(
            "Request body must be a JSON object",
            {"received": type(payload).__name__}
        )
    return payload


def format_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    """JSON-safe list of Pydantic errors."""
    return error.errors(include_url=False, include_context=False, include_input=False)


def _is_missing(err: dict[str, Any]) -> bool:
    return err["type"] == "missing" or err.get("input") in (None, "")


def error_message(model: type[BaseModel], error: PydanticValidationError) -> str:
    """Client-facing summary of a failed validation.

    Missing, null or empty fields are reported with the model's
    missing_fields_message when it defines one. Otherwise the message of the
    first error is used, without Pydantic's "Value error, " prefix.
    """
    errors = error.errors(include_url=False)
    missing_message = getattr(model, "missing_fields_message", None)
    if missing_message and any(_is_missing(err) for err in errors):
        return missing_message
    return errors[0]["msg"].removeprefix(VALUE_ERROR_PREFIX)


def _find_model_param(f) -> tuple[str, type[BaseModel]] | None:
    for name, param in inspect.signature(f).parameters.items():
        annotation = param.annotation
        if inspect.isclass(annotation) and issubclass(annotation, BaseModel):
            return name, annotation
    return None


def validate_request(f):
    """
    Decorator that validates the request body against a Pydantic model.

    The model is taken from the first view parameter annotated with a
    BaseModel subclass. Views without one are called unchanged.

    Raises:
        ValidationError: If the body does not satisfy the model
    """
    model_param = _find_model_param(f)

    @wraps(f)
    def wrapper(*args, **kwargs):
        if model_param is None:
            return f(*args, **kwargs)

        name, model = model_param
        try:
            kwargs[name] = model.model_validate(get_json_body())
        except PydanticValidationError as e:
            raise ValidationError(error_message(model, e), {"errors": format_errors(e)})

        return f(*args, **kwargs)

    return wrapper
