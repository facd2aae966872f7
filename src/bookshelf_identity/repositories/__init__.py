"""Abstract repository interfaces for identity management."""

from bookshelf_identity.repositories.user_credential_repository import (
    UserCredentialData,
    UserCredentialRepository,
)

__all__ = [
    "UserCredentialData",
    "UserCredentialRepository",
]
