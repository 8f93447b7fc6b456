"""
Database connection management
"""

import threading
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import get_database_url, settings, to_async_url
from ..logging import get_logger

logger = get_logger(__name__)

# Shared connection pool, built once per process
_async_engine: AsyncEngine | None = None
_async_session_local: async_sessionmaker[AsyncSession] | None = None
_initialized = False
_init_lock = threading.Lock()  # Protect initialization from race conditions


def _engine_options(database_url: str) -> dict[str, Any]:
    """Engine keyword arguments for the given URL.

    Pool sizing only applies to server databases; SQLite picks its own pool.
    """
    options: dict[str, Any] = {"echo": settings.sql_echo}
    if database_url.startswith("postgresql"):
        options["pool_size"] = settings.database_pool_size
        options["max_overflow"] = settings.database_max_overflow
    return options


def reset_database() -> None:
    """Reset database connections (for tests)."""
    global _async_engine, _async_session_local, _initialized
    _async_engine = None
    _async_session_local = None
    _initialized = False


async def dispose_database() -> None:
    """Close every pooled connection and forget the shared engine."""
    if _async_engine is not None:
        await _async_engine.dispose()
    reset_database()


async def test_database_connection() -> tuple[bool, str | None]:
    """
    Test the database connection and return helpful error messages.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if _async_engine is None:
        return False, "Database engine not initialized"

    try:
        async with _async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True, None
    except Exception as e:
        error_str = str(e)
        error_type = type(e).__name__

        if "does not exist" in error_str and "database" in error_str:
            db_name = get_database_url().split("/")[-1].split("?")[0]
            return False, (
                f"Cannot connect to database: {error_str}\n"
                f"The database '{db_name}' doesn't exist. "
                f"Create it and run `shoestore db upgrade`."
            )
        elif "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        elif "password authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check your database credentials."
            )
        elif "unable to open database file" in error_str:
            return False, (
                f"Cannot open SQLite database: {error_str}\n"
                f"Check that the directory in SHOESTORE_DATABASE_URL exists."
            )
        else:
            return False, f"Database connection error ({error_type}): {error_str}"


def init_database(database_url: str | None = None, force_reinit: bool = False) -> None:
    """Initialize the shared async connection pool.

    Thread-safe initialization using a lock to prevent race conditions
    when multiple threads attempt to initialize simultaneously.
    """
    global _async_engine, _async_session_local, _initialized

    # Fast path: already initialized, no lock needed
    if _initialized and not force_reinit and database_url is None:
        return

    with _init_lock:
        # Double-check after acquiring lock (another thread may have initialized)
        if _initialized and not force_reinit and database_url is None:
            return

        db_url = database_url or get_database_url()
        async_db_url = to_async_url(db_url)

        _async_engine = create_async_engine(async_db_url, **_engine_options(db_url))
        _async_session_local = async_sessionmaker(
            _async_engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

        _initialized = True
        logger.info("Database initialized", database_url=db_url)


def get_async_engine() -> AsyncEngine:
    """Get the shared async SQLAlchemy engine."""
    if _async_engine is None:
        init_database()
    if _async_engine is None:
        raise RuntimeError("Database not initialized")
    return _async_engine


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session from the shared pool.

    Commits when the block exits cleanly and rolls back on any exception.
    """
    if _async_session_local is None:
        init_database()

    if _async_session_local is None:
        raise RuntimeError("Database not initialized")

    async with _async_session_local() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
