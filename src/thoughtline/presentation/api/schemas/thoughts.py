"""Thought, comment and like schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict

from thoughtline.application.dtos.feed import (
    AuthorDTO,
    CommentDTO,
    ThoughtFeedItemDTO,
)
from thoughtline.presentation.api.schemas.base import CamelModel


class AuthorResponse(CamelModel):
    """Author summary embedded in thoughts and comments."""

    id: UUID
    email: str
    display_name: str | None = None

    @classmethod
    def from_dto(cls, dto: AuthorDTO) -> "AuthorResponse":
        return cls(id=dto.id, email=dto.email, display_name=dto.display_name)


class ThoughtResponse(CamelModel):
    """A thought with author, counts and the viewer's like state."""

    id: UUID
    user_id: UUID
    content: str
    created_at: datetime
    updated_at: datetime
    user: AuthorResponse
    like_count: int
    comment_count: int
    is_liked: bool

    @classmethod
    def from_dto(cls, dto: ThoughtFeedItemDTO) -> "ThoughtResponse":
        return cls(
            id=dto.id,
            user_id=dto.user_id,
            content=dto.content,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
            user=AuthorResponse.from_dto(dto.author),
            like_count=dto.like_count,
            comment_count=dto.comment_count,
            is_liked=dto.is_liked,
        )


class CommentResponse(CamelModel):
    """A comment with its author."""

    id: UUID
    thought_id: UUID
    user_id: UUID
    content: str
    created_at: datetime
    user: AuthorResponse

    @classmethod
    def from_dto(cls, dto: CommentDTO) -> "CommentResponse":
        return cls(
            id=dto.id,
            thought_id=dto.thought_id,
            user_id=dto.user_id,
            content=dto.content,
            created_at=dto.created_at,
            user=AuthorResponse.from_dto(dto.author),
        )


class ThoughtCreateRequest(CamelModel):
    """Request schema for publishing a thought."""

    content: str | None = None
    user_id: UUID | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "content": "Hello, ThoughtLine!",
                "userId": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
            },
        },
    )


class ThoughtUpdateRequest(CamelModel):
    """Request schema for editing a thought.

    ``userId`` is optional; when present only the author may edit.
    """

    content: str | None = None
    user_id: UUID | None = None


class CommentCreateRequest(CamelModel):
    """Request schema for commenting on a thought."""

    content: str | None = None
    user_id: UUID | None = None


class LikeRequest(CamelModel):
    """Request schema for toggling a like."""

    user_id: UUID | None = None


class LikeResponse(CamelModel):
    """Result of a like toggle."""

    success: bool = True
    liked: bool
