"""Root pytest configuration.

Seeds the environment before any application module is imported, so
settings resolve to an in-memory SQLite database and a test JWT secret.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (mocks and fakes)
    │   ├── bookshelf/         # Books domain and service
    │   └── bookshelf_identity/
    ├── integration/
    │   ├── persistence/       # SQLAlchemy repositories on SQLite
    │   └── api/               # HTTP tests through FastAPI's TestClient
    └── shared/                # In-memory repository fakes
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105

# Load .env.test if present, then fill in what tests need
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")

os.environ["JWT_SECRET_KEY"] = TEST_JWT_SECRET
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from bookshelf_config import clear_settings_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
