"""API test fixtures — FastAPI app over an in-memory SQLite database.

Invariants:
    - Every test gets a fresh in-memory SQLite database and a fresh ViewCache
    - db_manager patched so every dependency (gateway, get_db, readiness) uses it
    - bcrypt work factor lowered to keep registration tests fast

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Lifespan is not run by ASGITransport: the fixture installs db_manager itself
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from dashboard.api.deps import get_password_hasher, get_view_cache
from dashboard.db.base import Base
from dashboard.infrastructure.database import DatabaseSessionManager
from dashboard.infrastructure.password_hashing import BcryptHasher
from dashboard.infrastructure.view_cache import ViewCache
import dashboard.infrastructure.database as db_module
import dashboard.models  # noqa: F401
from dashboard.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
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
def view_cache():
    return ViewCache()


@pytest.fixture
async def client(test_engine, test_session_factory, view_cache):
    """FastAPI test client with the session manager and cache replaced."""
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    app.dependency_overrides[get_view_cache] = lambda: view_cache
    app.dependency_overrides[get_password_hasher] = lambda: BcryptHasher(rounds=4)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
