"""
Database configuration and session management.

This module contains the SQLAlchemy async engine, the session factory
and database table creation utilities.
"""

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from weather_lookup.config import settings

# Create async engine
engine = create_async_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    echo=settings.DEBUG and settings.LOG_LEVEL == "DEBUG",
    pool_pre_ping=True,
)

# Create async session factory
async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Base class for all database models
Base = declarative_base()


async def get_db() -> AsyncIterator[AsyncSession]:
    """
    Dependency function to get database session.

    Yields one async session per request. Each weather operation is a
    single read or a single insert, so there is no wider transaction to
    manage here; failures roll back and propagate.
    """
    async with async_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def create_tables():
    """
    Create all database tables.

    Used when AUTO_CREATE_TABLES is enabled; production schemas are
    managed through Alembic migrations.
    """
    import weather_lookup.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_tables():
    """
    Drop all database tables.

    WARNING: This will delete all data. Use with caution.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
