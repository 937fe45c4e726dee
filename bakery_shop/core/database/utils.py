"""
Engine and session factories for the bakery database.

SQLite (the default, via aiosqlite) and PostgreSQL (via asyncpg) are
supported. SQLite connections get foreign keys switched on so deleting a
product, pickup location or user that an order still refers to fails the
same way it does on PostgreSQL.
"""

from __future__ import annotations

import re

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .base import Base

_POSTGRES_SCHEME = re.compile(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://")


def normalize_url(db_url: str) -> str:
    """Point any ``postgres://``/``postgresql+<driver>://`` URL at asyncpg."""
    return _POSTGRES_SCHEME.sub("postgresql+asyncpg://", db_url, count=1)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(db_url: str, echo: bool = False) -> AsyncEngine:
    """Build the async engine for ``db_url``.

    Args:
        db_url: Database URL from ``DATABASE_URL``
        echo: Log every SQL statement

    Returns:
        AsyncEngine for the normalized URL
    """
    url = normalize_url(db_url)
    if not url.startswith("sqlite"):
        return create_async_engine(url, echo=echo, pool_pre_ping=True)

    engine = create_async_engine(url, echo=echo, connect_args={"check_same_thread": False})
    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory whose objects stay readable after commit."""
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create missing tables; used by tests and ``init_db``, Alembic owns real schema changes."""
    # Registers every table on the metadata
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all(engine: AsyncEngine) -> None:
    """Drop every table; tests only."""
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
