"""Bookshelf Identity - user accounts, authentication and access tokens.

This package handles all identity-related concerns:
- User management (registration, profile)
- Authentication (login, tokens, request gate)
- Password management (hashing, change)

Books only reference ``user_id``, keeping identity concerns separated.
"""

from bookshelf_identity.application.context import UserContext
from bookshelf_identity.application.services import (
    AuthenticationGate,
    AuthenticationService,
)
from bookshelf_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserNameError,
    User,
    UserNotFoundError,
    UserRepository,
)
from bookshelf_identity.exceptions import (
    AuthError,
    AuthFailureReason,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
    UnauthorizedError,
    WeakPasswordError,
)
from bookshelf_identity.repositories import (
    UserCredentialData,
    UserCredentialRepository,
)
from bookshelf_identity.schemas import TokenPayload
from bookshelf_identity.services import (
    JWTService,
    PasswordHashingService,
)

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidUserNameError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    # Exceptions
    "AuthError",
    "AuthFailureReason",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "TokenExpiredError",
    "UnauthorizedError",
    "WeakPasswordError",
    # Repositories
    "UserCredentialData",
    "UserCredentialRepository",
    # Schemas
    "TokenPayload",
    # Services
    "JWTService",
    "PasswordHashingService",
    # Application Context
    "UserContext",
    # Application Services
    "AuthenticationGate",
    "AuthenticationService",
]
