"""Async SQLAlchemy engine, session factory, and FastAPI dependency.

The engine is built once from repokit.config.settings at import time.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from repokit.config import Settings, settings

__all__ = ["AsyncSessionLocal", "Base", "Settings", "engine", "get_session", "settings"]

engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields a transactional async session.

    Commits when the handler returns, rolls back when it raises.
    """
    async with AsyncSessionLocal() as session:
        async with session.begin():
            yield session
