"""Fixtures for repository tests against in-memory SQLite."""

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Import models to register with Base.metadata
import bookshelf_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from bookshelf.infrastructure.persistence.sqlalchemy.models import Base


@pytest.fixture
async def test_db_engine():
    """Create an in-memory SQLite database with foreign keys enforced."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(test_db_engine):
    return async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(session_maker):
    """Create a test database session."""
    async with session_maker() as session:
        yield session
