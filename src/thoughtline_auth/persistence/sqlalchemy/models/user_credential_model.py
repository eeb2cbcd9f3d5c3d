"""SQLAlchemy model for user authentication credentials.

This model stores password hashes separately from the user profile.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from thoughtline.domain.shared.time import utc_now
from thoughtline_auth.persistence.sqlalchemy.base import AuthBase


class UserCredentialModel(AuthBase):
    """
    SQLAlchemy model for user authentication credentials.

    Each user has at most one credential record. Keeping the hash out of
    the users table means no profile query can ever select it.

    Table: user_credentials
    """

    __tablename__ = "user_credentials"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # No FK to stay decoupled from the users table
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        unique=True,
        nullable=False,
        index=True,
    )

    # bcrypt format, ~60 chars
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<UserCredentialModel(id={self.id}, user_id={self.user_id})>"
