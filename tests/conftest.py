"""Shared test fixtures for todo-core."""

import pytest

from todo_core.config import Settings
from todo_core.db import EXTENSION_KEY
from todo_core.main import create_app

TEST_SECRET = "test-secret-key-for-todo-core-tests"


@pytest.fixture
def test_settings():
    """Settings for tests: fast bcrypt, fixed secret, no .env file."""
    return Settings(
        _env_file=None,
        jwt_secret_key=TEST_SECRET,
        jwt_expiry_hours=24,
        bcrypt_work_factor=4,
        seed_demo_data=False,
    )


@pytest.fixture
def app(test_settings):
    """Create a Flask app with fresh, empty stores for each test."""
    app = create_app(test_settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def core(app):
    """The Core (stores + token service) behind the test app."""
    return app.extensions[EXTENSION_KEY]


@pytest.fixture
def test_user(core):
    """Create a test user.

    Returns a tuple of (user, password) where user is the stored User record
    and password is the plain text password.
    """
    password = "secret1"
    user = core.user.create("Test User", "test@example.com", password)
    return user, password


@pytest.fixture
def jwt_token(core, test_user):
    """JWT token for the test user."""
    user, _password = test_user
    return core.token.issue(user)


@pytest.fixture
def auth_headers(jwt_token):
    """Authorization header for the test user."""
    return {"Authorization": f"Bearer {jwt_token}"}


@pytest.fixture
def other_user(core):
    """A second user, for isolation tests."""
    return core.user.create("Other User", "other@example.com", "secret2")


@pytest.fixture
def other_auth_headers(core, other_user):
    """Authorization header for the second user."""
    return {"Authorization": f"Bearer {core.token.issue(other_user)}"}
