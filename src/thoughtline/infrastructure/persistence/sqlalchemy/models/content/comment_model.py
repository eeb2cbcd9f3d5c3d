"""SQLAlchemy model for comments."""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from thoughtline.domain.content import MAX_CONTENT_LENGTH
from thoughtline.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)


class CommentModel(Base, CreatedAtMixin):
    """Database model for comments on a thought."""

    __tablename__ = "comments"

    __table_args__ = (Index("ix_comments_thought_created", "thought_id", "created_at"),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    thought_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("thoughts.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(String(MAX_CONTENT_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<CommentModel(id={self.id}, thought_id={self.thought_id})>"
