"""
Pickup location repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from bakery_shop.core.models.domain.paging import Page, PageRequest

from ..entities.pickup_locations import PickupLocation
from .base import BaseRepository


class PickupLocationRepository(BaseRepository[PickupLocation]):
    """Repository for pickup location data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PickupLocation)

    async def find_by_name_like_ignore_case(self, pattern: str, page: PageRequest) -> Page[PickupLocation]:
        return await self.find_page(page, PickupLocation.name.ilike(pattern))

    async def count_by_name_like_ignore_case(self, pattern: str) -> int:
        return await self.count(PickupLocation.name.ilike(pattern))
