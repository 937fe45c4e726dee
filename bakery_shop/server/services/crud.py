"""
Generic CRUD service hierarchy.

``CrudService`` holds the operations every entity service shares (save,
delete, count, load, create_new) on top of a repository.
``FilterableCrudService`` adds the text-filtered, paged search used by the
list endpoints.

Write operations run inside ``transaction()``: any exception rolls the
session back before it propagates.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncIterator, Generic, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_shop.core.database.entities.users import User
from bakery_shop.core.database.repositories.base import BaseRepository, EntityType
from bakery_shop.core.errors import EntityNotFoundError, UserFriendlyDataError
from bakery_shop.core.logging_config import get_logger
from bakery_shop.core.models.domain.paging import Page, PageRequest

logger = get_logger(__name__)

CONCURRENT_UPDATE_MESSAGE = "Somebody else has updated the data while you were making changes."
IN_USE_MESSAGE = "The data is still referenced elsewhere and cannot be deleted."


def is_unique_violation(error: IntegrityError) -> bool:
    """Whether ``error`` comes from a unique constraint (SQLite and PostgreSQL wording)."""
    return "unique" in str(error.orig).lower()


class CrudService(ABC, Generic[EntityType]):
    """Shared create/read/update/delete operations for one entity type."""

    entity_name: str = "Entity"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @property
    @abstractmethod
    def repository(self) -> BaseRepository[EntityType]:
        """The repository backing this service."""

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Roll the session back if the wrapped block raises."""
        try:
            yield
        except Exception:
            await self.session.rollback()
            raise

    async def save(self, current_user: Optional[User], entity: EntityType) -> EntityType:
        """Insert or update ``entity``."""
        async with self.transaction():
            return await self.repository.save(entity)

    async def delete(self, current_user: Optional[User], entity: Optional[EntityType]) -> None:
        """Delete ``entity``; ``None`` means it was never found."""
        if entity is None:
            raise EntityNotFoundError(self.entity_name)
        entity_id = entity.id
        try:
            async with self.transaction():
                await self.repository.delete(entity)
        except IntegrityError as e:
            logger.info(f"Rejected deleting {self.entity_name} {entity_id}: still referenced")
            raise UserFriendlyDataError(IN_USE_MESSAGE) from e
        logger.info(f"{self.entity_name} {entity_id} deleted by {current_user.email if current_user else 'system'}")

    async def delete_by_id(self, current_user: Optional[User], entity_id: int) -> None:
        await self.delete(current_user, await self.load(entity_id))

    async def count(self) -> int:
        return await self.repository.count()

    async def load(self, entity_id: int) -> EntityType:
        """Load an entity by id or raise ``EntityNotFoundError``."""
        entity = await self.repository.get_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity

    @abstractmethod
    def create_new(self, current_user: Optional[User]) -> EntityType:
        """A fresh, unsaved entity with its defaults applied."""

    @staticmethod
    def check_version(entity: EntityType, version: Optional[int]) -> None:
        """Reject an update based on a stale copy of ``entity``."""
        if version is not None and version != entity.version:
            raise UserFriendlyDataError(CONCURRENT_UPDATE_MESSAGE)


class FilterableCrudService(CrudService[EntityType]):
    """A CRUD service that can also search its entities by a text filter."""

    @abstractmethod
    async def find_any_matching(self, filter: Optional[str], page: PageRequest) -> Page[EntityType]:
        """Entities matching ``filter`` (all entities when ``None``), one page at a time."""

    @abstractmethod
    async def count_any_matching(self, filter: Optional[str]) -> int:
        """Number of entities matching ``filter`` (all entities when ``None``)."""
