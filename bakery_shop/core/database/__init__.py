"""
Centralized database layer for Bakery Shop.

This package provides a unified location for all database entities and repositories.

Structure:
- entities/: SQLModel table models (users, products, pickup locations, orders)
- repositories/: Data access layer with derived queries and dashboard aggregates
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, create/drop all)
"""

from .base import Base, EntityBase
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
)

__all__ = [
    "Base",
    "EntityBase",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
    "engine",
    "get_session",
    "init_db",
]
