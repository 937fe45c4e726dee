"""
Application-wide engine and session factory.

Both are built once from ``DATABASE_URL``; request handlers get their session
through the ``get_session`` dependency.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from bakery_shop.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

engine = create_engine(settings.database_url, echo=settings.database_echo)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request, closed when the response is done."""
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """Create missing tables at startup; tables created by migrations are left alone."""
    await create_all(engine)
