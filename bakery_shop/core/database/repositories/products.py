"""
Product repository.

Derived queries used by the product service: case-insensitive LIKE search on
the product name, paged.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from bakery_shop.core.models.domain.paging import Page, PageRequest

from ..entities.products import Product
from .base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Repository for product data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Product)

    async def find_by(self, page: PageRequest) -> Page[Product]:
        """All products, paged."""
        return await self.find_page(page)

    async def find_by_name_like_ignore_case(self, pattern: str, page: PageRequest) -> Page[Product]:
        """Products whose name matches the LIKE ``pattern``, ignoring case."""
        return await self.find_page(page, Product.name.ilike(pattern))

    async def count_by_name_like_ignore_case(self, pattern: str) -> int:
        return await self.count(Product.name.ilike(pattern))
