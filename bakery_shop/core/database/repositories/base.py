"""
Base repository interfaces and utilities.

This module provides the foundational repository pattern used by every
repository in the database layer: generic async CRUD over a SQLModel entity,
plus query-building helpers for sorting and pagination.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from bakery_shop.core.logging_config import get_logger
from bakery_shop.core.models.domain.paging import Direction, Page, PageRequest

logger = get_logger(__name__)

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class BaseRepository(Generic[EntityType]):
    """Async repository with the common CRUD operations of a SQLModel entity."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """
        stmt = select(self.model).where(self.model.id == entity_id).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, entity: EntityType) -> EntityType:
        """Insert or update an entity and commit.

        Existing rows get their ``version`` bumped. The entity is reloaded
        afterwards so eagerly loaded relationships reflect the stored state.

        Args:
            entity: SQLModel instance to persist

        Returns:
            The persisted entity
        """
        if entity.id is not None and hasattr(entity, "version"):
            entity.version = (entity.version or 0) + 1
        self.session.add(entity)
        await self.session.commit()
        logger.debug(f"Saved {self.model.__name__} id={entity.id}")
        reloaded = await self.get_by_id(entity.id)
        return reloaded if reloaded is not None else entity

    async def delete(self, entity: EntityType) -> None:
        """Delete an entity and commit."""
        await self.session.delete(entity)
        await self.session.commit()
        logger.debug(f"Deleted {self.model.__name__} id={entity.id}")

    async def count(self, *criteria: Any) -> int:
        """Count rows matching all ``criteria`` (all rows when none given)."""
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def find_all(self, page: PageRequest) -> Page[EntityType]:
        """All entities, one page at a time."""
        return await self.find_page(page)

    async def find_page(self, page: PageRequest, *criteria: Any) -> Page[EntityType]:
        """Fetch one page of entities matching all ``criteria``.

        Args:
            page: Page index, size and sort orders
            criteria: SQLAlchemy boolean expressions combined with AND

        Returns:
            Page with the matching entities and the total match count
        """
        stmt = select(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        stmt = QueryBuilder.apply_sort(stmt, self.model, page.sort)
        stmt = QueryBuilder.apply_pagination(stmt, page.size, page.offset)
        result = await self.session.execute(stmt)
        items = list(result.scalars().all())
        total = await self.count(*criteria)
        return Page(items=items, total=total, page=page.page, size=page.size)


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_sort(stmt, model: Type[EntityType], sort: Sequence[tuple[str, Direction]]):
        """Apply sort orders; unknown fields are ignored and ``id`` breaks ties.

        Args:
            stmt: SQLAlchemy select statement
            model: SQLModel entity class
            sort: ``(field, direction)`` pairs

        Returns:
            Modified select statement with ORDER BY applied
        """
        columns = model.__table__.columns
        for name, direction in sort:
            if name not in columns:
                logger.debug(f"Ignoring sort on unknown field {model.__name__}.{name}")
                continue
            column = getattr(model, name)
            stmt = stmt.order_by(column.desc() if direction == Direction.DESC else column.asc())
        return stmt.order_by(model.id)

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a select statement.

        Args:
            stmt: SQLAlchemy select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt

    @staticmethod
    def like_pattern(value: str) -> str:
        """Wrap ``value`` as a ``%value%`` LIKE pattern."""
        return f"%{value}%"
