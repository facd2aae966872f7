"""Shared utilities for SQLAlchemy repositories."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(error: IntegrityError) -> bool:
    """Return True if ``error`` was raised by a unique constraint.

    SQLite reports ``UNIQUE constraint failed``; PostgreSQL reports
    ``duplicate key value violates unique constraint``.
    """
    text = str(error.orig if error.orig is not None else error).lower()
    return "unique" in text or "duplicate key" in text
