"""Abstract repository for user authentication credentials."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import UUID


@dataclass
class UserCredentialData:
    """Stored credentials of a single user."""

    user_id: UUID
    password_hash: str


class UserCredentialRepository(ABC):
    """Persistence contract for password hashes.

    Kept apart from the User aggregate so the hash never travels with
    user data.
    """

    @abstractmethod
    async def save(self, user_id: UUID, password_hash: str) -> UserCredentialData:
        """Create or replace the credentials of ``user_id``."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        """Return the credentials of ``user_id`` or None."""
