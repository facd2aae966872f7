"""FastAPI dependency injection for the Bookshelf API.

Provides dependencies for:
- Database sessions
- Authentication (current user from JWT)
- Service instances
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from bookshelf.application.services import BookService
from bookshelf.infrastructure.persistence.sqlalchemy.init_db import (
    ensure_sqlite_directory,
)
from bookshelf.infrastructure.persistence.sqlalchemy.repositories import (
    BookRepositorySQLAlchemy,
)
from bookshelf.presentation.api.config import get_api_settings
from bookshelf_config.settings import Settings, get_settings
from bookshelf_identity import (
    AuthenticationGate,
    AuthenticationService,
    JWTService,
    PasswordHashingService,
    UserContext,
)
from bookshelf_identity.infrastructure.persistence.sqlalchemy import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens; missing headers are handled by the gate
security = HTTPBearer(auto_error=False)


def _is_in_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (":memory:" in url or url.endswith("://"))


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url
    ensure_sqlite_directory(url)
    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    url = get_database_url()
    echo = get_settings().database_echo

    if _is_in_memory_sqlite(url):
        # One shared connection, otherwise every connection gets its own database
        return create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


def reset_engine_cache() -> None:
    """Forget the cached URL, engine and session maker (used by tests)."""
    get_database_url.cache_clear()
    get_engine.cache_clear()
    get_session_maker.cache_clear()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates registration, login and profile management.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


def get_authentication_gate(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
) -> AuthenticationGate:
    return AuthenticationGate(
        user_repository=UserRepositorySQLAlchemy(session),
        jwt_service=jwt_service,
    )


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


def _bearer_token(credentials: Optional[HTTPAuthorizationCredentials]) -> str | None:
    return credentials.credentials if credentials is not None else None


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    gate: AuthenticationGate = Depends(get_authentication_gate),
) -> UserContext:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Returns
    -------
    The authenticated user's context, also stored on ``request.state.user``

    Raises
    ------
    UnauthorizedError
        Rendered as 401 by the exception handlers
    """
    user = await gate.authenticate(_bearer_token(credentials))
    request.state.user = user
    return user


# Type alias for injected current user
CurrentUser = Annotated[UserContext, Depends(get_current_user)]


async def get_current_user_optional(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    gate: AuthenticationGate = Depends(get_authentication_gate),
) -> UserContext | None:
    """
    Optional authentication dependency.

    Returns the current user if a valid token is provided, None otherwise.
    """
    user = await gate.authenticate_optional(_bearer_token(credentials))
    request.state.user = user
    return user


# Type alias for optional current user
OptionalCurrentUser = Annotated[UserContext | None, Depends(get_current_user_optional)]


# -----------------------------------------------------------------------------
# Application Services
# -----------------------------------------------------------------------------


def get_book_service(session: DBSession) -> BookService:
    return BookService(BookRepositorySQLAlchemy(session))


# Type alias for injected book service
Books = Annotated[BookService, Depends(get_book_service)]
