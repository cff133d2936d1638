"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test database
    - db_manager patched for code paths that bypass get_db (readiness probe)
    - bcrypt runs at its minimum cost so registration-heavy tests stay fast
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("PASSWORD_BCRYPT_ROUNDS", "4")
os.environ.setdefault("API_URL", "http://test/api")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

import blog.infrastructure.database as db_module  # noqa: E402
from blog.db.base import Base  # noqa: E402
from blog.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
from blog.infrastructure.security import hash_password  # noqa: E402
from blog.main import app  # noqa: E402
from blog.models.post import Post  # noqa: E402
from blog.models.user import User  # noqa: E402
from tests.helpers import TEST_PASSWORD, login, register  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def api_transport(client):
    """In-process transport for BlogClient; depends on client for the DB override."""
    return ASGITransport(app=app)


@pytest.fixture
async def registered_user(client) -> dict:
    res = await register(client)
    assert res.status_code == 200, res.text
    return res.json()


@pytest.fixture
async def auth_headers(client, registered_user) -> dict:
    data = await login(client)
    return {"Authorization": f"Bearer {data['token']}"}


@pytest.fixture
async def seed_author(test_db) -> User:
    """Insert a user directly into the test DB."""
    user = User(
        name="Seed Author",
        email="seed@example.com",
        password=hash_password(TEST_PASSWORD),
    )
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
def make_posts(test_db, seed_author):
    """Insert posts with strictly increasing created_at (first spec is oldest)."""
    base = datetime(2020, 1, 1, tzinfo=timezone.utc)

    async def _make(specs: list[tuple[str, str]]) -> list[Post]:
        posts = [
            Post(
                title=title,
                content=content,
                published=True,
                author_id=seed_author.id,
                created_at=base + timedelta(minutes=i),
            )
            for i, (title, content) in enumerate(specs)
        ]
        test_db.add_all(posts)
        await test_db.commit()
        return posts

    return _make
