"""SQLAlchemy feed adapters (read side).

These are infrastructure implementations of application-layer feed ports.
"""

from thoughtline.infrastructure.persistence.sqlalchemy.adapters.feed.sqlalchemy_feed_read_adapter import (  # NOQA: E501
    SqlAlchemyFeedReadAdapter,
)

__all__ = ["SqlAlchemyFeedReadAdapter"]
