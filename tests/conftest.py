"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession


@pytest.fixture(scope="function")
def test_database(tmp_path: Path) -> Generator[tuple[str, Path], None, None]:
    """Return the DSN of a throwaway SQLite database file."""
    db_path = tmp_path / "shoestore_test.db"
    yield f"sqlite:///{db_path}", db_path


@pytest.fixture(scope="function")
def alembic_migrate(test_database: tuple[str, Path]) -> Generator[None, None, None]:
    """Run Alembic upgrade to head against the test database."""
    dsn, _ = test_database

    from shoestore.database.migrations import downgrade_schema, upgrade_schema

    os.environ["SHOESTORE_DATABASE_URL"] = dsn
    upgrade_schema("head")
    yield
    downgrade_schema("base")


@pytest_asyncio.fixture(scope="function")
async def reset_shared_db_connections(
    test_database: tuple[str, Path],
) -> AsyncGenerator[None, None]:
    """Point the shared connection pool at the test database."""
    from shoestore.database.connection import dispose_database, init_database, reset_database

    dsn, _ = test_database

    reset_database()
    init_database(dsn, force_reinit=True)

    yield

    await dispose_database()


@pytest_asyncio.fixture(scope="function")
async def db_session(
    alembic_migrate: None, reset_shared_db_connections: None
) -> AsyncGenerator[AsyncSession, None]:
    """Provide an async SQLAlchemy session on the migrated test database."""
    _ = alembic_migrate, reset_shared_db_connections

    from shoestore.database.connection import get_async_session

    async with get_async_session() as session:
        yield session


@pytest.fixture
def graphql_context() -> dict[str, Any]:
    """Context equivalent to what the HTTP router builds, minus the request."""
    from shoestore.database.connection import get_async_session

    return {"request": None, "get_session": get_async_session}


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "requires_db: mark test as requiring database connection")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
