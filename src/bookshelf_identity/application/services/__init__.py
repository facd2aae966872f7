"""Application services for identity management."""

from bookshelf_identity.application.services.authentication_gate import (
    AuthenticationGate,
)
from bookshelf_identity.application.services.authentication_service import (
    AuthenticationService,
)

__all__ = ["AuthenticationGate", "AuthenticationService"]
