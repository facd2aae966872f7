"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from bookshelf_identity.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """Immutable context for the current authenticated user."""

    user_id: UUID
    email: str
    first_name: str = ""
    last_name: str = ""

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(
            user_id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
        )

    def __str__(self) -> str:
        return f"UserContext({self.email})"
