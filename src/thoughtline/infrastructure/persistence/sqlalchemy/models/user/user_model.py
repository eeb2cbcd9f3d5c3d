"""SQLAlchemy model for User aggregate."""

from typing import Optional
from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from thoughtline.domain.user.aggregates import MAX_BIO_LENGTH, MAX_DISPLAY_NAME_LENGTH
from thoughtline.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting User aggregates.

    The unique index on email is what settles racing sign-ups. Password
    hashes are stored in user_credentials, never here.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    display_name: Mapped[Optional[str]] = mapped_column(
        String(MAX_DISPLAY_NAME_LENGTH),
        nullable=True,
    )
    bio: Mapped[Optional[str]] = mapped_column(
        String(MAX_BIO_LENGTH),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
