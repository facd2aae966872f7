"""SQLAlchemy models for identity management."""

from bookshelf_identity.infrastructure.persistence.sqlalchemy.models.user_credential_model import (  # NOQA: E501
    UserCredentialModel,
)
from bookshelf_identity.infrastructure.persistence.sqlalchemy.models.user_model import (  # NOQA: E501
    UserModel,
)

__all__ = [
    "UserCredentialModel",
    "UserModel",
]
