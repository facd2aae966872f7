"""SQLAlchemy model for user authentication credentials."""

from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.infrastructure.persistence.sqlalchemy.models.base import TimestampMixin
from bookshelf_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class UserCredentialModel(IdentityBase, TimestampMixin):
    """SQLAlchemy model for user authentication credentials."""

    __tablename__ = "user_credentials"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<UserCredentialModel(id={self.id}, user_id={self.user_id})>"
