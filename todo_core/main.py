"""Flask application entry point."""

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from . import __version__
from .config import Settings, settings
from .db import EXTENSION_KEY, Core
from .db.seed import seed_demo_data
from .exceptions import (
    AuthenticationError,
    ConflictError,
    ResourceNotFound,
    TodoCoreError,
    ValidationError,
)

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Something went wrong!"
ROUTE_NOT_FOUND_MESSAGE = "Route not found"


def _error_response(error: TodoCoreError, status: int):
    """Build the JSON error body for a TodoCoreError."""
    response = {
        "message": error.message,
        "error": {
            "type": error.__class__.__name__,
            "message": error.message
        }
    }
    if error.details:
        response["error"]["details"] = error.details
    return jsonify(response), status


# Error handlers
def handle_validation_error(error):
    """Handle ValidationError exceptions."""
    return _error_response(error, 400)


def handle_conflict(error):
    """Handle ConflictError exceptions (400 for API compatibility)."""
    return _error_response(error, 400)


def handle_authentication_error(error):
    """Handle AuthenticationError exceptions."""
    return _error_response(error, 401)


def handle_not_found(error):
    """Handle ResourceNotFound exceptions."""
    return _error_response(error, 404)


def handle_todo_core_error(error):
    """Handle any other TodoCoreError. The message is not exposed."""
    logger.error(f"{error.__class__.__name__}: {error.message}")
    return jsonify({
        "message": INTERNAL_ERROR_MESSAGE,
        "error": {
            "type": "InternalServerError",
            "message": INTERNAL_ERROR_MESSAGE
        }
    }), 500


def handle_http_exception(error):
    """Render werkzeug HTTP errors as JSON.

    A path without a route for the requested method is a missing route, so
    405 is answered like 404.
    """
    code = error.code
    if code in (404, 405):
        code = 404
        error_type = "NotFound"
        message = ROUTE_NOT_FOUND_MESSAGE
    else:
        error_type = error.__class__.__name__
        message = error.description
    return jsonify({
        "message": message,
        "error": {
            "type": error_type,
            "message": message
        }
    }), code


def handle_internal_error(error):
    """Handle uncaught exceptions. Details go to the log only."""
    logger.exception(f"Internal error: {error}")
    return jsonify({
        "message": INTERNAL_ERROR_MESSAGE,
        "error": {
            "type": "InternalServerError",
            "message": INTERNAL_ERROR_MESSAGE
        }
    }), 500


def health():
    """Health check endpoint."""
    return jsonify({
        "status": "ok",
        "message": "Todo API is running",
        "version": __version__,
        "mode": "in-memory"
    })


def create_app(config: Settings | None = None) -> Flask:
    """Create a Flask app with its own empty stores.

    Args:
        config: Settings to use (default: module-level settings from env)

    Returns:
        Configured Flask application
    """
    config = config or settings

    app = Flask(__name__)

    # CORS configuration
    CORS(
        app,
        origins=config.cors_origins,
        methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "Authorization"]
    )

    core = Core(config)
    app.extensions[EXTENSION_KEY] = core

    if config.seed_demo_data:
        seed_demo_data(core)

    app.register_error_handler(ValidationError, handle_validation_error)
    app.register_error_handler(ConflictError, handle_conflict)
    app.register_error_handler(AuthenticationError, handle_authentication_error)
    app.register_error_handler(ResourceNotFound, handle_not_found)
    app.register_error_handler(TodoCoreError, handle_todo_core_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_internal_error)

    app.add_url_rule("/", "index", health)
    app.add_url_rule("/health", "health", health)

    # Register API blueprints
    from .api.todos import todos_bp
    from .auth.api import auth_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(todos_bp)

    logger.info(f"App created ({core.user.count()} users loaded)")
    return app


def run():
    """Run the development server using HOST and PORT from settings."""
    app = create_app()
    logger.info(f"Server running on port {settings.port}")
    app.run(host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
