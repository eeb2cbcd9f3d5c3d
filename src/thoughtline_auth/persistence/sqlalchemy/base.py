"""SQLAlchemy declarative base for thoughtline_auth models.

This provides a separate Base for auth models. The consuming application
creates ``AuthBase.metadata`` alongside its own metadata.

Examples
--------
from thoughtline.infrastructure.persistence.sqlalchemy.models import Base
from thoughtline_auth.persistence.sqlalchemy import AuthBase

async with engine.begin() as conn:
    await conn.run_sync(Base.metadata.create_all)
    await conn.run_sync(AuthBase.metadata.create_all)
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for thoughtline_auth models."""
