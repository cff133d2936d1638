"""DatabaseSessionManager — rollback and error mapping on a real SQLite engine.

Invariants:
    - SQLAlchemy errors leaving a session become DatabaseError (503)
    - Non-database exceptions propagate unchanged
    - Pool sizing is only applied to non-SQLite URLs
"""

import pytest
from sqlalchemy import text

from blog.core.errors import DatabaseError
from blog.infrastructure.database import DatabaseSessionManager, _engine_options


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


def test_sqlite_gets_no_pool_sizing():
    assert _engine_options("sqlite+aiosqlite:///:memory:", 20, 10) == {
        "pool_pre_ping": True,
    }


def test_postgres_gets_sized_pool():
    options = _engine_options("postgresql+asyncpg://u:p@db/blog", 5, 2)
    assert options["pool_size"] == 5
    assert options["max_overflow"] == 2
    assert options["pool_recycle"] == 3600


async def test_operational_error_becomes_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.operation == "execute"
    assert exc_info.value.http_status == 503


async def test_other_exceptions_propagate_unchanged(manager):
    with pytest.raises(ValueError):
        async with manager.session():
            raise ValueError("not a database problem")


async def test_health_check_on_live_engine(manager):
    assert await manager.health_check() is True
