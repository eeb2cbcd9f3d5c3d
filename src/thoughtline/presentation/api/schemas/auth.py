"""Authentication schemas for request/response models.

Request fields are optional at the schema level so that a missing email,
password or token is reported with the service's own message.
"""

from pydantic import ConfigDict

from thoughtline.presentation.api.schemas.base import CamelModel
from thoughtline.presentation.api.schemas.users import UserResponse


class SignUpRequest(CamelModel):
    """Request schema for user registration."""

    email: str | None = None
    password: str | None = None
    display_name: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "secret1",
                "displayName": "Ada",
            },
        },
    )


class SignInRequest(CamelModel):
    """Request schema for sign-in."""

    email: str | None = None
    password: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "secret1",
            },
        },
    )


class VerifyRequest(CamelModel):
    """Request schema for session token verification."""

    token: str | None = None


class AuthResponse(CamelModel):
    """Response schema for sign-up and sign-in."""

    user: UserResponse
    token: str


class VerifyResponse(CamelModel):
    """Response schema for token verification."""

    user: UserResponse
