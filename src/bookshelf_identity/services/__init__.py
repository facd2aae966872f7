"""Identity services - JWT and password hashing."""

from bookshelf_identity.services.jwt_service import JWTService
from bookshelf_identity.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
