"""Tests for the authentication middleware.

Covers _authenticate_request() through the todos blueprint's before_request
hook and the @auth_required decorator on /auth/me.
"""

import logging

import pytest
import jwt as pyjwt
from flask import g

from todo_core.auth import decorators
from todo_core.db.models import User
from todo_core.exceptions import AuthenticationError
from todo_core.utils import isodatetime


class TestAuthenticateRequest:
    """Direct tests of the shared authentication logic."""

    def test_sets_user_on_g(self, app, test_user, auth_headers):
        user, _password = test_user
        with app.test_request_context("/todos", headers=auth_headers):
            decorators._authenticate_request()
            assert g.user_id == user.id
            assert g.user.email == user.email

    def test_missing_header(self, app):
        with app.test_request_context("/todos"):
            with pytest.raises(AuthenticationError) as exc_info:
                decorators._authenticate_request()
            assert exc_info.value.message == "Access token required"

    @pytest.mark.parametrize("header", ["Basic abc", "Bearer", "Bearer ", "token-without-scheme"])
    def test_non_bearer_header_treated_as_missing(self, app, header):
        with app.test_request_context("/todos", headers={"Authorization": header}):
            with pytest.raises(AuthenticationError) as exc_info:
                decorators._authenticate_request()
            assert exc_info.value.message == "Access token required"

    def test_invalid_token(self, app):
        with app.test_request_context("/todos", headers={"Authorization": "Bearer garbage"}):
            with pytest.raises(AuthenticationError) as exc_info:
                decorators._authenticate_request()
            assert exc_info.value.message == "Invalid or expired token"

    def test_expired_token_same_message_as_invalid(self, app, test_settings, test_user):
        user, _password = test_user
        past_ts = isodatetime.now_unix() - 3600
        expired = pyjwt.encode(
            {"sub": user.id, "email": user.email, "iat": past_ts - 86400, "exp": past_ts},
            test_settings.jwt_secret_key,
            algorithm="HS256",
        )
        with app.test_request_context("/todos", headers={"Authorization": f"Bearer {expired}"}):
            with pytest.raises(AuthenticationError) as exc_info:
                decorators._authenticate_request()
            assert exc_info.value.message == "Invalid or expired token"

    def test_rejected_token_logs_claimed_subject(self, app, test_user, caplog):
        user, _password = test_user
        forged = pyjwt.encode(
            {"sub": user.id, "email": user.email, "iat": 0, "exp": 4102444800},
            "not-the-server-secret-but-long-enough-for-hs256",
            algorithm="HS256",
        )
        with app.test_request_context("/todos", headers={"Authorization": f"Bearer {forged}"}):
            with caplog.at_level(logging.WARNING, logger="todo_core.auth.decorators"):
                with pytest.raises(AuthenticationError):
                    decorators._authenticate_request()

        assert f"claimed sub: {user.id}" in caplog.text
        assert forged not in caplog.text

    def test_garbage_token_logs_without_subject(self, app, caplog):
        with app.test_request_context("/todos", headers={"Authorization": "Bearer garbage"}):
            with caplog.at_level(logging.WARNING, logger="todo_core.auth.decorators"):
                with pytest.raises(AuthenticationError):
                    decorators._authenticate_request()

        assert "claimed sub: None" in caplog.text

    def test_token_for_unknown_user(self, app, core):
        """A validly signed token whose user doesn't exist is rejected."""
        ghost = User(name="Ghost", email="ghost@x.com", password_hash="x")
        token = core.token.issue(ghost)
        with app.test_request_context("/todos", headers={"Authorization": f"Bearer {token}"}):
            with pytest.raises(AuthenticationError) as exc_info:
                decorators._authenticate_request()
            assert exc_info.value.message == "Invalid or expired token"


class TestTodosMiddleware:
    """Every /todos route is behind the before_request hook."""

    @pytest.mark.parametrize("method,path", [
        ("get", "/todos"),
        ("post", "/todos"),
        ("get", "/todos/completed"),
        ("patch", "/todos/some-id/complete"),
        ("put", "/todos/some-id"),
        ("delete", "/todos/some-id"),
    ])
    def test_routes_require_token(self, client, method, path):
        response = getattr(client, method)(path, json={})
        assert response.status_code == 401

        data = response.get_json()
        assert data["error"]["type"] == "AuthenticationError"
        assert data["message"] == "Access token required"

    def test_rejected_before_handler_runs(self, client, core):
        """An unauthenticated create never reaches the task store."""
        client.post("/todos", json={"task": "x", "priority": "high", "date": "2025-01-01"})
        assert core.task.count() == 0

    def test_invalid_token_401(self, client):
        response = client.get("/todos", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.get_json()["message"] == "Invalid or expired token"

    def test_cors_preflight_not_blocked(self, client):
        response = client.options(
            "/todos",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
            }
        )
        assert response.status_code in (200, 204)


class TestAuthRequiredDecorator:
    """Tests for @auth_required via GET /auth/me."""

    def test_me_with_token(self, client, test_user, auth_headers):
        user, _password = test_user
        response = client.get("/auth/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.get_json()["user"] == {
            "id": user.id,
            "name": user.name,
            "email": user.email,
        }

    def test_me_without_token(self, client):
        response = client.get("/auth/me")
        assert response.status_code == 401
