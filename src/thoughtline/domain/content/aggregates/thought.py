"""Thought aggregate root for the content domain."""

from datetime import datetime
from uuid import UUID, uuid4

from thoughtline.domain.content.content_rules import validate_content
from thoughtline.domain.shared.time import utc_now


class Thought:
    """
    A short text post owned by exactly one user.

    The author and creation time never change; only the content can be
    edited. Likes and comments are separate records keyed by the thought id.
    """

    def __init__(
        self,
        user_id: UUID,
        content: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._content = validate_content(content)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def content(self) -> str:
        return self._content

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: UUID) -> bool:
        return self._user_id == user_id

    def edit(self, content: str) -> None:
        self._content = validate_content(content)
        self._updated_at = utc_now()

    @classmethod
    def create(cls, user_id: UUID, content: str) -> "Thought":
        return cls(user_id=user_id, content=content)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        user_id: UUID,
        content: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Thought":
        return cls(
            id=id,
            user_id=user_id,
            content=content,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Thought):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Thought(id={self._id}, user_id={self._user_id})"
