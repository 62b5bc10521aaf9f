"""
Tests for Authentication Pydantic schemas (API validation).

Tests verify that:
- Registration requires every field and enforces password rules
- confirmPassword is accepted under its API spelling
- Login requires email and password
- UserResponse never carries the password hash
"""

import pytest
from pydantic import ValidationError

from todo_core.auth.schemas import AuthResponse, UserLogin, UserRegister, UserResponse
from todo_core.db.models import User


def valid_registration(**overrides) -> dict:
    data = {
        "name": "A",
        "email": "a@x.com",
        "password": "secret1",
        "confirmPassword": "secret1",
    }
    data.update(overrides)
    return data


class TestUserRegister:
    """Tests for UserRegister schema."""

    def test_valid_data(self):
        data = UserRegister(**valid_registration())
        assert data.name == "A"
        assert data.email == "a@x.com"
        assert data.confirm_password == "secret1"

    def test_snake_case_confirm_password_accepted(self):
        data = valid_registration()
        data["confirm_password"] = data.pop("confirmPassword")
        assert UserRegister(**data).confirm_password == "secret1"

    @pytest.mark.parametrize("field", ["name", "email", "password", "confirmPassword"])
    def test_missing_field_rejected(self, field):
        data = valid_registration()
        del data[field]
        with pytest.raises(ValidationError):
            UserRegister(**data)

    @pytest.mark.parametrize("field", ["name", "email"])
    def test_empty_field_rejected(self, field):
        with pytest.raises(ValidationError):
            UserRegister(**valid_registration(**{field: ""}))

    def test_password_min_length_enforced(self):
        with pytest.raises(ValidationError) as exc_info:
            UserRegister(**valid_registration(password="short", confirmPassword="short"))

        errors = exc_info.value.errors()
        assert any("at least 6 characters" in str(err["msg"]) for err in errors)

    def test_password_exactly_min_length_accepted(self):
        UserRegister(**valid_registration(password="123456", confirmPassword="123456"))

    def test_password_over_72_bytes_rejected(self):
        long_password = "a" * 73
        with pytest.raises(ValidationError):
            UserRegister(**valid_registration(password=long_password, confirmPassword=long_password))

    def test_password_mismatch_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            UserRegister(**valid_registration(confirmPassword="secret2"))

        errors = exc_info.value.errors()
        assert any("Passwords do not match" in str(err["msg"]) for err in errors)


class TestUserLogin:
    """Tests for UserLogin schema."""

    def test_valid_data(self):
        data = UserLogin(email="a@x.com", password="secret1")
        assert data.email == "a@x.com"

    @pytest.mark.parametrize("missing", ["email", "password"])
    def test_missing_field_rejected(self, missing):
        data = {"email": "a@x.com", "password": "secret1"}
        del data[missing]
        with pytest.raises(ValidationError):
            UserLogin(**data)


class TestUserResponse:
    """Tests for UserResponse schema."""

    def test_from_user_record_drops_password_hash(self):
        user = User(name="A", email="a@x.com", password_hash="$2b$04$hash")
        response = UserResponse.model_validate(user).model_dump()

        assert response == {"id": user.id, "name": "A", "email": "a@x.com"}

    def test_auth_response_shape(self):
        user = UserResponse(id="1", name="A", email="a@x.com")
        body = AuthResponse(message="ok", user=user, token="t").model_dump()
        assert set(body) == {"message", "user", "token"}
