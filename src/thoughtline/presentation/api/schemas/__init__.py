"""Pydantic request/response schemas for the API."""

from thoughtline.presentation.api.schemas.auth import (
    AuthResponse,
    SignInRequest,
    SignUpRequest,
    VerifyRequest,
    VerifyResponse,
)
from thoughtline.presentation.api.schemas.base import CamelModel, SuccessResponse
from thoughtline.presentation.api.schemas.thoughts import (
    AuthorResponse,
    CommentCreateRequest,
    CommentResponse,
    LikeRequest,
    LikeResponse,
    ThoughtCreateRequest,
    ThoughtResponse,
    ThoughtUpdateRequest,
)
from thoughtline.presentation.api.schemas.users import (
    ProfileUpdateRequest,
    UserResponse,
)

__all__ = [
    "AuthResponse",
    "AuthorResponse",
    "CamelModel",
    "CommentCreateRequest",
    "CommentResponse",
    "LikeRequest",
    "LikeResponse",
    "ProfileUpdateRequest",
    "SignInRequest",
    "SignUpRequest",
    "SuccessResponse",
    "ThoughtCreateRequest",
    "ThoughtResponse",
    "ThoughtUpdateRequest",
    "UserResponse",
    "VerifyRequest",
    "VerifyResponse",
]
