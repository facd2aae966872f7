"""SQLAlchemy persistence for identity management."""

from bookshelf_identity.infrastructure.persistence.sqlalchemy.models import (
    UserCredentialModel,
    UserModel,
)
from bookshelf_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
