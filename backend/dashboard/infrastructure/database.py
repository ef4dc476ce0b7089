"""Database Session Manager — async connection pool plus the SQL gateway used by form actions.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - SqlAlchemyGateway commits each statement in its own session

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Gateway takes textual statements with named binds: handlers stay free of
      ORM imports and test fakes only record (statement, params) pairs
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Mapping

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from dashboard.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("Integrity constraint violated", "commit")
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown")
        except OSError as e:
            logger.error(f"DB connection failed: {e}")
            raise DatabaseError("Database unreachable", "connect")
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


class SqlAlchemyGateway:
    """SqlGateway over DatabaseSessionManager — one committed statement per call."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def execute(self, statement: str, params: Mapping[str, Any]) -> int:
        """Run a write statement and commit. Returns rows affected."""
        async with self._manager.session() as db:
            result = await db.execute(text(statement), dict(params))
            await db.commit()
            return result.rowcount

    async def fetch_one(
        self, statement: str, params: Mapping[str, Any],
    ) -> dict | None:
        async with self._manager.session() as db:
            result = await db.execute(text(statement), dict(params))
            row = result.mappings().first()
            return dict(row) if row is not None else None


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def close_db() -> None:
    global db_manager
    if db_manager:
        await db_manager.dispose()
    db_manager = None


def get_db_manager() -> DatabaseSessionManager:
    """FastAPI dependency for the process-wide session manager."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions (read-side routes)."""
    async with get_db_manager().session() as session:
        yield session
