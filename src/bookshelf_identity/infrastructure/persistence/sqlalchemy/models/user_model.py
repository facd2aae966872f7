"""SQLAlchemy model for User aggregate."""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.infrastructure.persistence.sqlalchemy.models.base import TimestampMixin
from bookshelf_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class UserModel(IdentityBase, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates.

    Contains identity and profile data only. The password hash is stored
    in the user_credentials table.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
