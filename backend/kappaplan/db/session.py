"""
Database session management with async SQLAlchemy 2.0 over SQLite.
Handles engine lifecycle and per-request sessions.
"""

from pathlib import Path
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)
from typing import AsyncGenerator, Optional

from kappaplan.core.config import settings
from kappaplan.core.logging import get_logger

logger = get_logger(__name__)

# Global engine and sessionmaker
engine: Optional[AsyncEngine] = None
async_session_maker: Optional[async_sessionmaker[AsyncSession]] = None


def database_file() -> Path:
    """Path of the SQLite database file."""
    return Path(settings.DATABASE_PATH)


def create_engine() -> AsyncEngine:
    """Create async SQLAlchemy engine for the configured database file."""
    global engine

    database_file().parent.mkdir(parents=True, exist_ok=True)

    engine = create_async_engine(
        settings.DATABASE_URL,
        echo=False,  # Set to True for SQL query logging
        connect_args={"check_same_thread": False},
    )

    logger.info(
        "Database engine created",
        extra={"database_path": settings.DATABASE_PATH},
    )

    return engine


def create_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Create async sessionmaker."""
    global async_session_maker

    if engine is None:
        create_engine()

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    logger.info("Sessionmaker created")
    return async_session_maker


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting database session.
    Yields a session and ensures it's closed after use.
    """
    if async_session_maker is None:
        create_sessionmaker()

    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """Initialize database connection, create tables and seed defaults."""
    from kappaplan.db.init_db import create_tables, seed_initial_data

    if engine is None:
        create_engine()

    if async_session_maker is None:
        create_sessionmaker()

    await create_tables()
    await seed_initial_data()

    logger.info("Database initialized")


async def close_db() -> None:
    """Close database connections and forget the engine."""
    global engine, async_session_maker

    if engine:
        await engine.dispose()
        logger.info("Database connections closed")

    engine = None
    async_session_maker = None
