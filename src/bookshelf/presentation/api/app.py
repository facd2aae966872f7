"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

All resource endpoints live under the /api prefix. The health check
and the info endpoint stay at the root.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from bookshelf.infrastructure.persistence.sqlalchemy.init_db import create_tables
from bookshelf.presentation.api.dependencies import OptionalCurrentUser, get_engine
from bookshelf.presentation.api.exception_handlers import setup_exception_handlers
from bookshelf.presentation.api.routers import auth_router, books_router
from bookshelf.presentation.api.schemas import HealthResponse
from bookshelf_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the bookshelf application with:
    - Console output with timestamps and module names
    - Configurable log level for bookshelf modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("bookshelf").setLevel(log_level)
    logging.getLogger("bookshelf_identity").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """User accounts and access tokens.

**Registration & Login:**
- Register with email, password, first and last name
- Login to obtain a JWT access token
- Send it as `Authorization: Bearer <token>`

**Security:**
- Passwords are hashed with bcrypt
- Tokens are stateless and expire after a configurable number of hours
""",
    },
    {
        "name": "Books",
        "description": """Your personal book collection.

Every book belongs to the user who created it. Books of other users
are never listed and behave as if they did not exist.
""",
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
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Bookshelf API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    # Dispose the shared engine and its connection pool
    logger.info("Shutting down Bookshelf API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Create missing tables and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_api_router() -> APIRouter:
    """Create the API router with all resource endpoints."""
    api_router = APIRouter()
    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(books_router, prefix="/books", tags=["Books"])
    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description=(
            "A personal **book collection** service with "
            "**JWT authentication** and per-user ownership."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers and monitoring."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/", tags=["Info"])
    async def root(user: OptionalCurrentUser) -> dict:
        """API root endpoint with version information.

        Works without a token; with a valid one the caller is named.
        """
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_PREFIX,
            "authenticated_as": user.email if user else None,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_PREFIX}/auth",
                "books": f"{API_PREFIX}/books",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "bookshelf.presentation.api.app:app",
        host=_settings.api_host,
        port=_settings.api_port,
        reload=_settings.api_debug,
    )
