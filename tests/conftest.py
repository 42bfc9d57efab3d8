"""Pytest configuration for async testing.

This configuration ensures:
1. Settings load without a real deployment environment (SQLite URL, testing env)
2. Async tests are marked for pytest-asyncio
3. Database fixtures are isolated (fresh SQLite file per test)
"""

import inspect
import os

# Must run before anything imports src.core.config (settings load at import)
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "testing")

from collections.abc import AsyncIterator, Callable
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double that records calls (LoggerProtocol-shaped)."""
    return MagicMock(spec=LoggerProtocol)


# =============================================================================
# Database
# =============================================================================


@pytest_asyncio.fixture
async def database(tmp_path) -> AsyncIterator[Database]:
    """Fresh SQLite database file with all tables created.

    A file (not :memory:) so several sessions see the same data, which the
    concurrency tests rely on.
    """
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def make_unit_of_work(
    database: Database, mock_logger: MagicMock
) -> AsyncIterator[Callable[[], SqlAlchemyUnitOfWork]]:
    """Factory for extra units of work on the test database.

    Every unit of work created through the factory is closed at teardown.
    """
    created: list[SqlAlchemyUnitOfWork] = []

    def _make() -> SqlAlchemyUnitOfWork:
        uow = SqlAlchemyUnitOfWork(database.session_factory(), mock_logger)
        created.append(uow)
        return uow

    yield _make

    for uow in created:
        await uow.close()


@pytest_asyncio.fixture
async def unit_of_work(
    make_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> SqlAlchemyUnitOfWork:
    """Unit of work on the test database (closed at teardown)."""
    return make_unit_of_work()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        function = getattr(item, "function", None)
        if function is not None and inspect.iscoroutinefunction(function):
            item.add_marker(pytest.mark.asyncio)
