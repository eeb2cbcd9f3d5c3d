"""SQLAlchemy model for thoughts."""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from thoughtline.domain.content import MAX_CONTENT_LENGTH
from thoughtline.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class ThoughtModel(Base, TimestampMixin):
    """Database model for thoughts."""

    __tablename__ = "thoughts"

    __table_args__ = (
        # Feed ordering and per-author listing
        Index("ix_thoughts_created_at", "created_at"),
        Index("ix_thoughts_user_created", "user_id", "created_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(String(MAX_CONTENT_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<ThoughtModel(id={self.id}, user_id={self.user_id})>"
