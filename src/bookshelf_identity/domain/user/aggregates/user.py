"""User aggregate for identity concerns only."""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from bookshelf.domain.shared.time import utc_now
from bookshelf_identity.domain.user.exceptions import InvalidUserNameError
from bookshelf_identity.domain.user.value_objects.email import Email


class User:
    """
    User aggregate root.

    Holds identity and profile data. The password hash is stored
    separately by the credential repository and is never part of the
    aggregate.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        first_name: str,
        last_name: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._first_name = self._require_name(first_name, "First name")
        self._last_name = self._require_name(last_name, "Last name")
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(
        self,
        email: Optional[Union[str, Email]] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> None:
        """Apply the given fields; ``None`` leaves a field unchanged."""
        if email is not None:
            self._email = email if isinstance(email, Email) else Email(email)
        if first_name is not None:
            self._first_name = self._require_name(first_name, "First name")
        if last_name is not None:
            self._last_name = self._require_name(last_name, "Last name")
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        first_name: str,
        last_name: str,
    ) -> "User":
        return cls(email=email, first_name=first_name, last_name=last_name)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        first_name: str,
        last_name: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            created_at=created_at,
            updated_at=updated_at,
        )

    @staticmethod
    def _require_name(value: str, field: str) -> str:
        stripped = (value or "").strip()
        if not stripped:
            msg = f"{field} cannot be empty"
            raise InvalidUserNameError(msg)
        return stripped

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
