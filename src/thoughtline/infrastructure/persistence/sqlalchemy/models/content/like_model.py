"""SQLAlchemy model for likes."""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from thoughtline.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)


class LikeModel(Base, CreatedAtMixin):
    """
    One row per (user, thought) pair.

    The composite primary key is the uniqueness guarantee for likes.
    """

    __tablename__ = "likes"

    __table_args__ = (Index("ix_likes_thought_id", "thought_id"),)

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    thought_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("thoughts.id", ondelete="CASCADE"),
        primary_key=True,
    )

    def __repr__(self) -> str:
        return f"<LikeModel(user_id={self.user_id}, thought_id={self.thought_id})>"
