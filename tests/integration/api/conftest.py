"""Pytest fixtures for API integration tests.

Each test gets a fresh in-memory database: the engine cache is reset
and the app lifespan creates the tables inside the TestClient loop.
"""

import pytest
from fastapi.testclient import TestClient

from bookshelf.presentation.api.app import API_PREFIX, create_app
from bookshelf.presentation.api.config import get_api_settings
from bookshelf.presentation.api.dependencies import (
    get_password_service,
    reset_engine_cache,
)
from bookshelf_identity import PasswordHashingService


@pytest.fixture
def api_prefix() -> str:
    """Get the API prefix for building URLs."""
    return API_PREFIX


@pytest.fixture
def test_client():
    """Create a test client backed by a fresh in-memory database."""
    get_api_settings.cache_clear()
    reset_engine_cache()

    app = create_app()
    # Low cost factor keeps bcrypt fast in tests
    app.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        rounds=4,
    )

    with TestClient(app) as client:
        yield client

    get_api_settings.cache_clear()
    reset_engine_cache()


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "email": "reader@example.com",
        "password": "Password123!",
        "firstName": "Ada",
        "lastName": "Reader",
    }


@pytest.fixture
def registered_user(test_client, registered_user_data, api_prefix) -> dict:
    """Register the test user and return the response body."""
    response = test_client.post(f"{api_prefix}/auth/register", json=registered_user_data)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered_user) -> dict:
    """Get auth headers for the registered user."""
    return {"Authorization": f"Bearer {registered_user['token']}"}


@pytest.fixture
def other_auth_headers(test_client, api_prefix) -> dict:
    """Get auth headers for a second, unrelated user."""
    response = test_client.post(
        f"{api_prefix}/auth/register",
        json={
            "email": "other@example.com",
            "password": "Password123!",
            "firstName": "Grace",
            "lastName": "Other",
        },
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def book_data() -> dict:
    return {
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "isbn": "9780743273565",
        "publishedYear": 1925,
    }
