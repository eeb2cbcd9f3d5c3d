"""Comment entity: a reply attached to one thought."""

from datetime import datetime
from uuid import UUID, uuid4

from thoughtline.domain.content.content_rules import validate_content
from thoughtline.domain.shared.time import utc_now


class Comment:
    """Immutable once created; removed only together with its thought."""

    def __init__(
        self,
        thought_id: UUID,
        user_id: UUID,
        content: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._thought_id = thought_id
        self._user_id = user_id
        self._content = validate_content(content)
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def thought_id(self) -> UUID:
        return self._thought_id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def content(self) -> str:
        return self._content

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @classmethod
    def create(cls, thought_id: UUID, user_id: UUID, content: str) -> "Comment":
        return cls(thought_id=thought_id, user_id=user_id, content=content)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Comment):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Comment(id={self._id}, thought_id={self._thought_id})"
