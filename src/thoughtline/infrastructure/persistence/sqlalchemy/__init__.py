"""SQLAlchemy persistence: models, repositories, read adapters and engine helpers."""

from thoughtline.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_tables,
)
from thoughtline.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)

__all__ = [
    "SQLAlchemyRepositoryFactory",
    "create_engine",
    "create_tables",
]
