"""Value objects for the user domain."""

from bookshelf_identity.domain.user.value_objects.email import Email

__all__ = [
    "Email",
]
