"""Infrastructure fixtures — in-memory SQLite behind the real session manager.

Invariants:
    - Every test gets a fresh in-memory database with users + invoices tables
    - DatabaseSessionManager built around the test engine (no pool kwargs:
      SQLite's static pool rejects pool_size)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from dashboard.db.base import Base
from dashboard.infrastructure.database import (
    DatabaseSessionManager, SqlAlchemyGateway,
)
import dashboard.models  # noqa: F401


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
def test_manager(test_engine):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    return manager


@pytest.fixture
def sql_gateway(test_manager):
    return SqlAlchemyGateway(test_manager)
