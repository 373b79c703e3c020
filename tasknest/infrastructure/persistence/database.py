"""Async engine, session factory and declarative Base.

The engine is built on first use (ensure_engine) rather than at import, so
importing models or repositories never requires DATABASE_URL. Schema changes
go through Alembic (tasknest/infrastructure/persistence/migrations).
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from tasknest.core.config import Settings, get_settings
from tasknest.infrastructure.exceptions import StoreOperationError

logger = logging.getLogger(__name__)

engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


def _engine_options(settings: Settings) -> dict[str, Any]:
    options: dict[str, Any] = {"echo": settings.database_echo}
    if settings.database_url.startswith("postgresql"):
        options.update(
            pool_pre_ping=True,
            pool_recycle=3600,
            pool_size=settings.db_pool_size or 20,
            max_overflow=settings.db_max_overflow or 30,
            connect_args={"command_timeout": settings.db_command_timeout or 60},
        )
    return options


def ensure_engine() -> None:
    """Create the engine and session factory once per process."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    engine = create_async_engine(settings.database_url, **_engine_options(settings))
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    logger.info("Database engine created (dialect=%s)", engine.dialect.name)


async def get_db() -> AsyncIterator[AsyncSession]:
    """Session for read routes. Never commits."""
    ensure_engine()
    async with AsyncSessionLocal() as session:
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Session for write routes: commits when the route returns, rolls back if it raises.

    Must be declared with Depends(..., scope="function") so the commit runs
    before the response is sent; a failed commit is raised as
    StoreOperationError and reported to the caller as INTERNAL_ERROR.
    """
    ensure_engine()
    async with AsyncSessionLocal() as session:
        try:
            async with session.begin():
                yield session
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Transaction commit failed")
            raise StoreOperationError("commit") from e
