"""Database Session Manager: one async engine per process, one session per request.

Invariants:
    - A session that raises rolls back before it closes
    - SQLAlchemy failures leave as DatabaseError (503); other exceptions pass through

Design Decisions:
    - expire_on_commit=False: stores build frozen records after commit
    - Pool sizing only for server databases; SQLite keeps its default pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from bookmanager.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(pool_size=pool_size, max_overflow=max_overflow)
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error("Database session rolled back: %s", e)
                raise DatabaseError(type(e).__name__, "session") from e

    async def health_check(self) -> bool:
        """True when `SELECT 1` succeeds. Used by the readiness route."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except (DatabaseError, OSError) as e:
            logger.error("DB health check failed: %s", e)
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


# Set by init_db during app startup
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
