"""
Request Dependencies.

Provides per-request service instances bound to the request's database
session, and resolves the authenticated staff member from HTTP Basic
credentials.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_shop.core.database import get_session
from bakery_shop.core.database.entities.users import User
from bakery_shop.core.database.repositories.users import UserRepository
from bakery_shop.core.errors import AccessDeniedError
from bakery_shop.core.logging_config import get_logger
from bakery_shop.core.models.domain.enums import Role
from bakery_shop.core.models.domain.paging import PageRequest

from .order_service import OrderService
from .passwords import verify_password
from .pickup_location_service import PickupLocationService
from .product_service import ProductService
from .user_service import UserService

logger = get_logger(__name__)

security = HTTPBasic(realm="Bakery")

SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def get_current_user(
    session: SessionDep,
    credentials: Annotated[HTTPBasicCredentials, Depends(security)],
) -> User:
    """Resolve the staff member behind the request's Basic credentials."""
    user = await UserRepository(session).find_by_email_ignore_case(credentials.username)
    if user is None or not verify_password(credentials.password, user.password_hash):
        logger.info(f"Rejected credentials for {credentials.username!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


async def require_admin(current_user: CurrentUserDep) -> User:
    """Only let administrators through."""
    if current_user.role != Role.ADMIN:
        raise AccessDeniedError()
    return current_user


AdminUserDep = Annotated[User, Depends(require_admin)]


def get_product_service(session: SessionDep) -> ProductService:
    return ProductService(session)


def get_pickup_location_service(session: SessionDep) -> PickupLocationService:
    return PickupLocationService(session)


def get_user_service(session: SessionDep) -> UserService:
    return UserService(session)


def get_order_service(session: SessionDep) -> OrderService:
    return OrderService(session)


ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
PickupLocationServiceDep = Annotated[PickupLocationService, Depends(get_pickup_location_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]


def get_page_request(
    page: Annotated[int, Query(ge=0, description="Zero-based page index")] = 0,
    size: Annotated[int, Query(ge=1, le=500, description="Page size")] = 20,
    sort: Annotated[list[str], Query(description="Sort orders such as `name` or `price,desc`")] = [],
) -> PageRequest:
    """Build a ``PageRequest`` from the standard paging query parameters."""
    try:
        return PageRequest.of(page, size, *sort)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


PageRequestDep = Annotated[PageRequest, Depends(get_page_request)]
