"""User domain manages user identity and profile data only.

This domain handles:
- User aggregate (id, email, first and last name)
- Email value object
- Repository contract for users

Books and other owned resources only reference the user id.
"""

from bookshelf_identity.domain.user.aggregates import User
from bookshelf_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserNameError,
    UserNotFoundError,
)
from bookshelf_identity.domain.user.repositories import UserRepository
from bookshelf_identity.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidUserNameError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
