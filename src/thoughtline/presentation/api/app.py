"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

All resource endpoints live under the /api prefix. The health check and
the info endpoint are unprefixed.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from thoughtline import __version__
from thoughtline.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_tables,
)
from thoughtline.presentation.api.config import get_api_settings
from thoughtline.presentation.api.dependencies import create_session_maker
from thoughtline.presentation.api.exception_handlers import setup_exception_handlers
from thoughtline.presentation.api.routers import (
    auth_router,
    thoughts_router,
    users_router,
)
from thoughtline_config.settings import Settings, get_settings


@lru_cache(maxsize=4)
def _configure_logging(level_name: str) -> None:
    """Configure application logging.

    Sets up logging for the thoughtline packages with:
    - Console output with timestamps and module names
    - Configurable log level (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, level_name.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("thoughtline", "thoughtline_auth", "thoughtline_config"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_PREFIX = "/api"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Sign-up, sign-in and session token verification.

- Passwords are hashed with bcrypt and never returned
- Session tokens are HS256 JWTs valid for 7 days
- Unknown email and wrong password produce the same error
""",
    },
    {
        "name": "Thoughts",
        "description": """The feed: short text posts of up to 280 characters.

- `GET /thoughts` lists newest first; filter by author with `userId`
- Pass `viewerId` to fill in `isLiked`
- Likes toggle; comments are listed oldest first
- Deleting a thought removes its likes and comments
""",
    },
    {
        "name": "Users",
        "description": "Profile editing (display name up to 50, bio up to 160).",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info("Starting ThoughtLine API v%s...", API_VERSION)
    if settings.uses_default_jwt_secret:
        logger.warning(
            "Using the development JWT secret; set JWT_SECRET_KEY before "
            "exposing this server",
        )

    # One engine per application, built from the settings it was created with
    engine = create_engine(settings.database_url)
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)
    await create_tables(engine)
    yield

    # Shutdown - dispose the engine and its connection pool
    logger.info("Shutting down ThoughtLine API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_api_router() -> APIRouter:
    """Create the API router with all resource endpoints."""
    api_router = APIRouter()

    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(thoughts_router, prefix="/thoughts", tags=["Thoughts"])
    api_router.include_router(users_router, prefix="/users", tags=["Users"])

    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing. When given, it replaces
        the cached settings for every request-scoped dependency, and the
        lifespan opens the database at its ``database_url``.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on app creation (not on module import)
    _configure_logging(settings.log_level)

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description="A minimal social feed: thoughts, likes, comments and profiles.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.settings = settings
    app.dependency_overrides[get_api_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint. Unprefixed for load balancers."""
        return {
            "status": "healthy",
            "version": API_VERSION,
        }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_PREFIX}/auth",
                "thoughts": f"{API_PREFIX}/thoughts",
                "users": f"{API_PREFIX}/users",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
