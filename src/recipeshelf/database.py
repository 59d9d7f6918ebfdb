"""Database configuration and session management."""

from collections.abc import AsyncIterator, Iterator
from functools import lru_cache

from sqlalchemy import Engine, create_engine
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from recipeshelf.config import get_settings

# Async driver -> sync driver for the same database
_SYNC_DRIVERS = {
    "+asyncpg": "+psycopg",
    "+aiosqlite": "",
}


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


def sync_database_url(url: str) -> str:
    """Swap an async driver in the URL for its synchronous counterpart."""
    for async_driver, sync_driver in _SYNC_DRIVERS.items():
        url = url.replace(async_driver, sync_driver)
    return url


def _echo() -> bool:
    settings = get_settings()
    return settings.sql_echo and settings.is_development


# Async engine for FastAPI endpoints
@lru_cache
def get_async_engine() -> AsyncEngine:
    return create_async_engine(get_settings().database_url, echo=_echo(), pool_pre_ping=True)


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_async_engine(), class_=AsyncSession, expire_on_commit=False)


# Sync engine for Celery tasks, batch imports and scripts
@lru_cache
def get_engine() -> Engine:
    return create_engine(
        sync_database_url(get_settings().database_url), echo=_echo(), pool_pre_ping=True
    )


@lru_cache
def get_session_factory() -> sessionmaker[Session]:
    """Get the session factory bound to the process-wide sync engine."""
    return sessionmaker(get_engine(), expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    """Dependency for FastAPI endpoints."""
    async with get_async_session_factory()() as session:
        yield session


def get_sync_db() -> Iterator[Session]:
    """Dependency for endpoints that run a whole import batch on the sync engine."""
    with get_session_factory()() as session:
        yield session
