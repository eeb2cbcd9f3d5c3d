"""FastAPI dependency injection for the ThoughtLine API.

Provides dependencies for:
- Database sessions
- Auth services (JWT, password hashing, authentication)
- Repository factory for commands and queries
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from thoughtline.application.services import AuthenticationService
from thoughtline.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyRepositoryFactory,
)
from thoughtline.presentation.api.config import get_api_settings
from thoughtline_auth import JWTService, PasswordHashingService
from thoughtline_config.settings import Settings

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create the session maker shared by all requests of one application.

    Returns
    -------
    async_sessionmaker bound to ``engine``
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    One session per request, from the session maker the application's
    lifespan stored on ``app.state``. Routers commit explicitly; anything
    left uncommitted is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    session_maker: async_sessionmaker[AsyncSession] = request.app.state.session_maker
    async with session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        token_expire_days=settings.jwt_token_expire_days,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_bcrypt_rounds)


# -----------------------------------------------------------------------------
# Repository Factory
# -----------------------------------------------------------------------------


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """
    Get repository factory bound to the request's session.

    Commands and queries are built from it with ``from_factory()``.
    """
    return SQLAlchemyRepositoryFactory(session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


async def get_authentication_service(
    factory: RepoFactory,
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
    password_service: Annotated[PasswordHashingService, Depends(get_password_service)],
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates sign-up, sign-in and token verification.
    """
    return AuthenticationService(
        user_repository=factory.user_repository(),
        credential_repository=factory.credential_repository(),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]
