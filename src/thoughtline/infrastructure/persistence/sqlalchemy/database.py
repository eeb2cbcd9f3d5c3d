"""Database engine and schema utilities."""

import logging
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Import models to register with their metadata
from thoughtline.infrastructure.persistence.sqlalchemy.models import Base
from thoughtline_auth.persistence.sqlalchemy import AuthBase

logger = logging.getLogger(__name__)

ALL_METADATA = (Base.metadata, AuthBase.metadata)


def _on_sqlite_connect(dbapi_connection, _connection_record) -> None:
    # Driver must not emit its own BEGIN, otherwise SAVEPOINTs misbehave
    dbapi_connection.isolation_level = None
    # SQLite ignores ON DELETE CASCADE unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _on_sqlite_begin(conn) -> None:
    conn.exec_driver_sql("BEGIN")


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or not url.database:
        return
    if url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def create_engine(database_url: str, **kwargs) -> AsyncEngine:
    """
    Create an async engine for ``database_url``.

    SQLite databases get their parent directory created, foreign keys
    switched on and an explicit BEGIN per transaction.
    """
    _ensure_sqlite_directory(database_url)
    engine = create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
        **kwargs,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _on_sqlite_connect)
        event.listen(engine.sync_engine, "begin", _on_sqlite_begin)
    return engine


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")
    async with engine.begin() as conn:
        for metadata in ALL_METADATA:
            await conn.run_sync(metadata.create_all)
    logger.info("Database schema is up to date")
