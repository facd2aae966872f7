"""Database schema management for the bookshelf tables.

Console entry points:
    bookshelf-db-init            create missing tables
    bookshelf-db-reset [--force] drop and recreate everything
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Import models to register with Base.metadata
import bookshelf_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from bookshelf.infrastructure.persistence.sqlalchemy.models import Base
from bookshelf_config.settings import get_settings

logger = logging.getLogger(__name__)


def ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def _engine_from_settings() -> AsyncEngine:
    database_url = get_settings().database_url
    ensure_sqlite_directory(database_url)
    return create_async_engine(database_url, pool_pre_ping=True)


async def create_tables(engine: Optional[AsyncEngine] = None) -> list[str]:
    """Create missing tables and return the names of all known tables.

    Existing tables and their rows are left alone. An engine created
    here is disposed afterwards; a passed-in engine is not.
    """
    owned = engine is None
    engine = engine or _engine_from_settings()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    finally:
        if owned:
            await engine.dispose()

    tables = sorted(Base.metadata.tables)
    logger.info("Schema ready: %s", ", ".join(tables))
    return tables


async def drop_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Drop every bookshelf table, data included."""
    owned = engine is None
    engine = engine or _engine_from_settings()
    logger.warning("Dropping tables: %s", ", ".join(sorted(Base.metadata.tables)))
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    finally:
        if owned:
            await engine.dispose()


def _display_url(database_url: str) -> str:
    return make_url(database_url).render_as_string(hide_password=True)


def _confirm_reset(database_url: str) -> bool:
    print(f"Database: {_display_url(database_url)}")
    print("All users and books will be deleted.")
    return input("Type 'yes' to confirm: ").strip().lower() == "yes"


async def reset_database(engine: Optional[AsyncEngine] = None) -> list[str]:
    """Drop and recreate the schema."""
    await drop_tables(engine)
    return await create_tables(engine)


def db_init() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_tables())


def db_reset() -> None:
    logging.basicConfig(level=logging.INFO)
    force = "--force" in sys.argv[1:] or "-f" in sys.argv[1:]
    if not force and not _confirm_reset(get_settings().database_url):
        print("Aborted.")
        sys.exit(1)
    asyncio.run(reset_database())
