"""
Product Service.

Manages bakery products: name search, paging and saving with a readable
error when the name is already taken.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_shop.core.database.entities.products import Product
from bakery_shop.core.database.entities.users import User
from bakery_shop.core.database.repositories.base import QueryBuilder
from bakery_shop.core.database.repositories.products import ProductRepository
from bakery_shop.core.errors import UserFriendlyDataError
from bakery_shop.core.logging_config import get_logger
from bakery_shop.core.models.domain.paging import Page, PageRequest

from .crud import FilterableCrudService, is_unique_violation

logger = get_logger(__name__)

DUPLICATE_NAME_MESSAGE = "There is already a product with that name. Please select a unique name for the product."


class ProductService(FilterableCrudService[Product]):
    """Business operations for products."""

    entity_name = "Product"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self._repository = ProductRepository(session)

    @property
    def repository(self) -> ProductRepository:
        return self._repository

    async def find_any_matching(self, filter: Optional[str], page: PageRequest) -> Page[Product]:
        if filter is not None:
            return await self._repository.find_by_name_like_ignore_case(QueryBuilder.like_pattern(filter), page)
        return await self.find(page)

    async def count_any_matching(self, filter: Optional[str]) -> int:
        if filter is not None:
            return await self._repository.count_by_name_like_ignore_case(QueryBuilder.like_pattern(filter))
        return await self.count()

    async def find(self, page: PageRequest) -> Page[Product]:
        """All products, paged."""
        return await self._repository.find_by(page)

    def create_new(self, current_user: Optional[User]) -> Product:
        return Product(name="", price=0)

    async def save(self, current_user: Optional[User], entity: Product) -> Product:
        """Save a product, rewording a duplicate name into a user-facing error."""
        name = entity.name
        try:
            return await super().save(current_user, entity)
        except IntegrityError as e:
            if not is_unique_violation(e):
                raise
            logger.info(f"Rejected product with duplicate name {name!r}: {e.orig}")
            raise UserFriendlyDataError(DUPLICATE_NAME_MESSAGE) from e
