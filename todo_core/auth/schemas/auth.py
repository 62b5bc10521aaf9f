"""Pydantic schemas for authentication requests and responses."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...utils.secret import MAX_PASSWORD_BYTES

MIN_PASSWORD_LENGTH = 6


class UserBase(BaseModel):
    """Fields shared by user schemas."""

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=1, max_length=254)


class UserRegister(UserBase):
    """Registration request body.

    Accepts confirmPassword (the API's spelling) or confirm_password.
    """

    missing_fields_message: ClassVar[str] = "All fields are required"

    password: str = Field(..., min_length=1)
    confirm_password: str = Field(..., min_length=1, alias="confirmPassword")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def check_password(self) -> "UserRegister":
        # Mismatch is reported before length
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        if len(self.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return self


class UserLogin(BaseModel):
    """Login request body."""

    missing_fields_message: ClassVar[str] = "Email and password are required"

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Public view of a user. Never includes the password hash."""

    id: str
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class TokenPayload(BaseModel):
    """Decoded access token claims."""

    sub: str
    email: str
    iat: int
    exp: int


class AuthResponse(BaseModel):
    """Response for successful registration or login."""

    message: str
    user: UserResponse
    token: str
