"""
User Service.

Administers staff accounts. Locked accounts cannot be modified or deleted,
nobody can delete their own account and email addresses are unique.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_shop.core.database.entities.users import User
from bakery_shop.core.database.repositories.base import QueryBuilder
from bakery_shop.core.database.repositories.users import UserRepository
from bakery_shop.core.errors import UserFriendlyDataError
from bakery_shop.core.logging_config import get_logger
from bakery_shop.core.models.domain.enums import Role
from bakery_shop.core.models.domain.paging import Page, PageRequest
from bakery_shop.core.models.io.users import UserCreate, UserUpdate

from .crud import FilterableCrudService, is_unique_violation
from .passwords import hash_password

logger = get_logger(__name__)

DELETING_SELF_NOT_PERMITTED = "You cannot delete your own account"
MODIFY_LOCKED_USER_NOT_PERMITTED = "User has been locked and cannot be modified or deleted"
DUPLICATE_EMAIL_MESSAGE = "There is already an account for this email address."


class UserService(FilterableCrudService[User]):
    """Business operations for staff accounts."""

    entity_name = "User"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self._repository = UserRepository(session)

    @property
    def repository(self) -> UserRepository:
        return self._repository

    async def find_any_matching(self, filter: Optional[str], page: PageRequest) -> Page[User]:
        if filter is not None:
            return await self._repository.find_matching(QueryBuilder.like_pattern(filter), page)
        return await self._repository.find_all(page)

    async def count_any_matching(self, filter: Optional[str]) -> int:
        if filter is not None:
            return await self._repository.count_matching(QueryBuilder.like_pattern(filter))
        return await self.count()

    def create_new(self, current_user: Optional[User]) -> User:
        return User(email="", role=Role.BARISTA)

    def build(self, data: UserCreate) -> User:
        """A new, unsaved user from an API payload."""
        user = self.create_new(None)
        user.email = data.email
        user.first_name = data.first_name
        user.last_name = data.last_name
        user.role = data.role
        user.locked = data.locked
        user.password_hash = hash_password(data.password)
        return user

    def apply_update(self, user: User, data: UserUpdate) -> User:
        """Copy the non-null fields sent in ``data`` onto ``user``; passwords are re-hashed."""
        self.check_version(user, data.version)
        changes = data.model_dump(exclude_unset=True, exclude_none=True, exclude={"password", "version"})
        for key, value in changes.items():
            setattr(user, key, value)
        if data.password:
            user.password_hash = hash_password(data.password)
        return user

    async def save(self, current_user: Optional[User], entity: User) -> User:
        email = entity.email
        try:
            async with self.transaction():
                # Discards the rejected changes still pending on the session
                self._throw_if_user_locked(entity)
                if await self._repository.email_taken(email, entity.id):
                    logger.info(f"Rejected duplicate account email {email!r}")
                    raise UserFriendlyDataError(DUPLICATE_EMAIL_MESSAGE)
                return await self.repository.save(entity)
        except IntegrityError as e:
            if not is_unique_violation(e):
                raise
            logger.info(f"Rejected duplicate account email {email!r}")
            raise UserFriendlyDataError(DUPLICATE_EMAIL_MESSAGE) from e

    async def delete(self, current_user: Optional[User], entity: Optional[User]) -> None:
        if entity is not None:
            if current_user is not None and current_user.id == entity.id:
                raise UserFriendlyDataError(DELETING_SELF_NOT_PERMITTED)
            if entity.locked:
                raise UserFriendlyDataError(MODIFY_LOCKED_USER_NOT_PERMITTED)
        await super().delete(current_user, entity)

    @staticmethod
    def _throw_if_user_locked(entity: User) -> None:
        """Reject changes to an account that was already locked when loaded."""
        if entity.id is None:
            return
        history = inspect(entity).attrs.locked.history
        previous = history.deleted or history.unchanged
        was_locked = bool(previous[0]) if previous else bool(entity.locked)
        if was_locked:
            raise UserFriendlyDataError(MODIFY_LOCKED_USER_NOT_PERMITTED)
