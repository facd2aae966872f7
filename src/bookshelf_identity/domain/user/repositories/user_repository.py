"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from bookshelf_identity.domain.user.aggregates.user import User
from bookshelf_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their exact email address."""

    @abstractmethod
    async def exists_by_email(
        self,
        email: Union[str, Email],
        exclude_user_id: Optional[UUID] = None,
    ) -> bool:
        """Check if a user other than ``exclude_user_id`` has the email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user.

        Raises EmailAlreadyExistsError on a unique email violation.
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user by ID."""
