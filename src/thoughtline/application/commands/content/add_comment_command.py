"""Add a comment to a thought."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from thoughtline.domain.content import (
    Comment,
    CommentRepository,
    ThoughtNotFoundError,
    ThoughtRepository,
)
from thoughtline.domain.shared.exceptions import ValidationError
from thoughtline.domain.user import UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from thoughtline.application.factories import RepositoryFactory


class AddCommentCommand:
    """Attach a comment by an existing user to an existing thought."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        thought_repository: ThoughtRepository,
        user_repository: UserRepository,
    ):
        self._comment_repo = comment_repository
        self._thought_repo = thought_repository
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AddCommentCommand:
        return cls(
            comment_repository=factory.comment_repository(),
            thought_repository=factory.thought_repository(),
            user_repository=factory.user_repository(),
        )

    async def execute(
        self,
        thought_id: UUID,
        user_id: UUID | None,
        content: str | None,
    ) -> Comment:
        if not content or user_id is None:
            msg = "Content and userId are required"
            raise ValidationError(msg)

        comment = Comment.create(
            thought_id=thought_id,
            user_id=user_id,
            content=content,
        )

        if await self._thought_repo.find_by_id(thought_id) is None:
            raise ThoughtNotFoundError(thought_id)
        if await self._user_repo.find_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        await self._comment_repo.save(comment)
        return comment
