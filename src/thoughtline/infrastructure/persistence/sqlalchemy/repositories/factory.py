"""SQLAlchemy repository factory bound to a single session."""

from sqlalchemy.ext.asyncio import AsyncSession

from thoughtline.infrastructure.persistence.sqlalchemy.adapters.feed import (
    SqlAlchemyFeedReadAdapter,
)
from thoughtline.infrastructure.persistence.sqlalchemy.repositories.content import (
    CommentRepositorySQLAlchemy,
    LikeRepositorySQLAlchemy,
    ThoughtRepositorySQLAlchemy,
)
from thoughtline.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)
from thoughtline_auth.persistence.sqlalchemy import (
    UserCredentialRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._thought_repo: ThoughtRepositorySQLAlchemy | None = None
        self._feed_read_adapter: SqlAlchemyFeedReadAdapter | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def credential_repository(self) -> UserCredentialRepositorySQLAlchemy:
        return UserCredentialRepositorySQLAlchemy(self._session)

    def thought_repository(self) -> ThoughtRepositorySQLAlchemy:
        if self._thought_repo is None:
            self._thought_repo = ThoughtRepositorySQLAlchemy(self._session)
        return self._thought_repo

    def comment_repository(self) -> CommentRepositorySQLAlchemy:
        return CommentRepositorySQLAlchemy(self._session)

    def like_repository(self) -> LikeRepositorySQLAlchemy:
        return LikeRepositorySQLAlchemy(self._session)

    def feed_read_port(self) -> SqlAlchemyFeedReadAdapter:
        if self._feed_read_adapter is None:
            self._feed_read_adapter = SqlAlchemyFeedReadAdapter(self._session)
        return self._feed_read_adapter
