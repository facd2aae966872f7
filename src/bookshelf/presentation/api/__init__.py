"""REST API presentation layer for Bookshelf.

This package provides a FastAPI-based REST API for the Bookshelf application.

Structure:
    api/
    ├── app.py               # FastAPI application factory
    ├── config.py            # API configuration
    ├── dependencies.py      # Dependency injection
    ├── exception_handlers.py
    ├── validation.py        # Field error helpers
    ├── routers/             # API route handlers
    └── schemas/             # Pydantic request/response schemas
"""
