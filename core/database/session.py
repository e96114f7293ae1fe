"""
AsyncSession providers.

Web requests only read: their session is always rolled back when the
request ends. Scripts get a committing session from
``get_standalone_session``.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.database.engine import close_engine, get_engine

_async_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Bind a sessionmaker to the shared engine on first call."""
    global _async_session_factory
    if _async_session_factory is None:
        _async_session_factory = async_sessionmaker(
            bind=get_engine(),
            expire_on_commit=False,
            autoflush=False,
        )
    return _async_session_factory


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Request dependency; see ``DBSession``."""
    async with get_session_factory()() as session:
        try:
            yield session
        finally:
            await session.rollback()


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


@asynccontextmanager
async def get_standalone_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Session for code running outside a request.

    Commits when the block completes; rolls back and re-raises otherwise.

        async with get_standalone_session() as session:
            session.add(Official(...))
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        await session.commit()


async def init_database() -> None:
    """Create any missing directory tables (used by the seed script)."""
    import modules.directory.models  # noqa: F401
    from core.database.base import Base

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db_connections() -> None:
    """Drop the session factory and dispose of the engine."""
    global _async_session_factory
    _async_session_factory = None
    await close_engine()
