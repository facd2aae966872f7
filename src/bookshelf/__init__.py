"""Bookshelf - personal book collections behind a JWT-protected REST API.

The core domain (books) only references the owning user's id; identity
concerns (users, passwords, tokens) live in ``bookshelf_identity``.
"""
