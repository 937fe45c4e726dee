"""
Pickup Location Service.

Manages the places where orders are collected and provides the default
location for new orders.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_shop.core.database.entities.pickup_locations import PickupLocation
from bakery_shop.core.database.entities.users import User
from bakery_shop.core.database.repositories.base import QueryBuilder
from bakery_shop.core.database.repositories.pickup_locations import PickupLocationRepository
from bakery_shop.core.errors import EntityNotFoundError, UserFriendlyDataError
from bakery_shop.core.models.domain.paging import Page, PageRequest

from .crud import FilterableCrudService, is_unique_violation

DUPLICATE_NAME_MESSAGE = "There is already a pickup location with that name."


class PickupLocationService(FilterableCrudService[PickupLocation]):
    """Business operations for pickup locations."""

    entity_name = "PickupLocation"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self._repository = PickupLocationRepository(session)

    @property
    def repository(self) -> PickupLocationRepository:
        return self._repository

    async def find_any_matching(self, filter: Optional[str], page: PageRequest) -> Page[PickupLocation]:
        if filter is not None:
            return await self._repository.find_by_name_like_ignore_case(QueryBuilder.like_pattern(filter), page)
        return await self._repository.find_all(page)

    async def count_any_matching(self, filter: Optional[str]) -> int:
        if filter is not None:
            return await self._repository.count_by_name_like_ignore_case(QueryBuilder.like_pattern(filter))
        return await self.count()

    async def get_default(self) -> PickupLocation:
        """The first pickup location; raises when none has been set up."""
        page = await self.find_any_matching(None, PageRequest(page=0, size=1))
        if not page.items:
            raise EntityNotFoundError(self.entity_name)
        return page.items[0]

    def create_new(self, current_user: Optional[User]) -> PickupLocation:
        return PickupLocation(name="")

    async def save(self, current_user: Optional[User], entity: PickupLocation) -> PickupLocation:
        try:
            return await super().save(current_user, entity)
        except IntegrityError as e:
            if not is_unique_violation(e):
                raise
            raise UserFriendlyDataError(DUPLICATE_NAME_MESSAGE) from e
