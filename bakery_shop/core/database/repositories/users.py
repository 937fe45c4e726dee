"""
User repository.

Besides the generic CRUD operations this provides lookup by email and the
free-text search used by user administration (email, first name, last name
or role).
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import String, cast, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_shop.core.models.domain.paging import Page, PageRequest

from ..entities.users import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for staff account data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def find_by_email_ignore_case(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Whether another account already uses ``email``, ignoring case."""
        criteria = [func.lower(User.email) == email.lower()]
        if exclude_id is not None:
            criteria.append(User.id != exclude_id)
        return await self.count(*criteria) > 0

    @staticmethod
    def _matching(pattern: str):
        # Role is an enum column; compare against its stored name
        return or_(
            User.email.ilike(pattern),
            User.first_name.ilike(pattern),
            User.last_name.ilike(pattern),
            cast(User.role, String).ilike(pattern),
        )

    async def find_matching(self, pattern: str, page: PageRequest) -> Page[User]:
        """Users whose email, first name, last name or role matches ``pattern``."""
        return await self.find_page(page, self._matching(pattern))

    async def count_matching(self, pattern: str) -> int:
        return await self.count(self._matching(pattern))
