"""Integration tests for Database (engine and session factory).

Tests cover:
- check_connection() against a reachable and an unreachable database
- create_all() / drop_all() manage the catalog tables
- SQLite connections enforce foreign keys
- Sessions keep loaded objects readable after commit
"""

import pytest
from sqlalchemy import inspect as sa_inspect
from sqlalchemy import text
from uuid_extensions import uuid7

from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.models import Category


async def _table_names(db: Database) -> set[str]:
    async with db.engine.connect() as conn:
        return set(await conn.run_sync(lambda sync_conn: sa_inspect(sync_conn).get_table_names()))


@pytest.mark.integration
class TestDatabaseLifecycle:
    async def test_check_connection_succeeds(self, database):
        assert await database.check_connection() is True

    async def test_check_connection_fails_for_unreachable_file(self, tmp_path):
        db = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'catalog.db'}")
        try:
            assert await db.check_connection() is False
        finally:
            await db.close()

    async def test_create_all_creates_catalog_tables(self, database):
        assert {"categories", "products"} <= await _table_names(database)

    async def test_drop_all_removes_catalog_tables(self, database):
        await database.drop_all()

        assert not {"categories", "products"} & await _table_names(database)

    def test_sqlite_detection(self, tmp_path):
        db = Database(f"sqlite+aiosqlite:///{tmp_path / 'x.db'}")

        assert db.is_sqlite is True


@pytest.mark.integration
class TestDatabaseSessions:
    async def test_foreign_keys_enabled(self, database):
        async with database.engine.connect() as conn:
            result = await conn.execute(text("PRAGMA foreign_keys"))

            assert result.scalar_one() == 1

    async def test_objects_stay_loaded_after_commit(self, database):
        category = Category(id=uuid7(), name="Audio", created_by="seed")

        async with database.session_factory() as session:
            session.add(category)
            await session.commit()

            # expire_on_commit=False: no lazy reload needed
            assert category.name == "Audio"
            assert category.row_version
