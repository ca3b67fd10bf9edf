"""
Notes API - Database Engine Management
=======================================

What:  Async SQLAlchemy engine factory, session factory, declarative base and
       lifecycle helpers.
Why:   Centralizes all connection logic in one place. The engine is built once
       at startup and shared by every request.
How:   create_async_engine() with connection pooling; sessions are opened per
       store call by the repository.
Who:   Used by the application lifespan (startup/shutdown), the health check
       and the SQLAlchemy notes repository.

Connection Pooling Strategy:
    pool_size / max_overflow come from settings. SQLite (used in tests and for
    local experiments) does not accept those options, so they are only passed
    for server databases.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from notes_api.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for migrations.
    """
    pass


def build_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Create the async engine for the configured database.

    Creating the engine does not open a connection; call ping() to verify
    the database is reachable.
    """
    url = database_url or settings.database_url
    options: Dict[str, Any] = {
        # Echo SQL in DEBUG mode only; SQL logging is noisy
        "echo": settings.log_level == "DEBUG",
    }
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(url, **options)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: returned rows stay readable after commit
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def ping(engine: AsyncEngine) -> None:
    """
    Run a lightweight SELECT 1 against the database.

    Raises whatever the driver raises when the database is unreachable;
    callers decide whether that is fatal (startup) or reportable (health).
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables known to Base.metadata (tests and SQLite setups)."""
    # Import models so they register with Base before create_all
    from notes_api.models import note  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
    logger.info("Database connections closed.")
