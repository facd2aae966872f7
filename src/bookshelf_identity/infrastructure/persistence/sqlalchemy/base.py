"""SQLAlchemy declarative base for bookshelf_identity models.

Uses the same metadata as bookshelf's Base to allow cross-module foreign keys.
"""

from bookshelf.infrastructure.persistence.sqlalchemy.models.base import Base

# books.owner_id references users.id, so both must share one metadata
IdentityBase = Base
