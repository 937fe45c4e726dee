"""
API endpoints for administering staff accounts.

All endpoints are reserved for administrators. Locked accounts cannot be
modified or deleted and nobody can delete their own account.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from bakery_shop.core.logging_config import get_logger
from bakery_shop.core.models.io import CountRead, PageRead, UserCreate, UserRead, UserUpdate
from bakery_shop.server.services.deps import AdminUserDep, PageRequestDep, UserServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["users"])


@router.get(
    "",
    response_model=PageRead[UserRead],
    summary="List Users",
    description="Retrieve one page of staff accounts whose email, first name, last name or role matches the filter.",
    response_description="A page of user objects; password hashes are never returned.",
    responses={
        200: {"description": "Users retrieved successfully"},
        403: {"description": "Current user is not an administrator"},
    },
)
async def list_users(
    service: UserServiceDep,
    admin: AdminUserDep,
    page: PageRequestDep,
    filter: Optional[str] = Query(default=None, description="Fragment of email, name or role"),
) -> PageRead[UserRead]:
    result = await service.find_any_matching(filter, page)
    return PageRead[UserRead].from_page(result, UserRead.model_validate)


@router.get(
    "/count",
    response_model=CountRead,
    summary="Count Users",
    description="Count the staff accounts matching an optional filter.",
)
async def count_users(
    service: UserServiceDep,
    admin: AdminUserDep,
    filter: Optional[str] = Query(default=None, description="Fragment of email, name or role"),
) -> CountRead:
    return CountRead(count=await service.count_any_matching(filter))


@router.get(
    "/new",
    response_model=UserRead,
    summary="New User Template",
    description="Return an unsaved account with its default values (role barista, unlocked).",
)
async def new_user(service: UserServiceDep, admin: AdminUserDep) -> UserRead:
    return UserRead.model_validate(service.create_new(admin))


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get User by ID",
    description="Retrieve a specific staff account by its unique identifier.",
    responses={
        200: {"description": "User found"},
        404: {"description": "User not found"},
    },
)
async def get_user(user_id: int, service: UserServiceDep, admin: AdminUserDep) -> UserRead:
    return UserRead.model_validate(await service.load(user_id))


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    description="Create a staff account. Email addresses are unique.",
    responses={
        201: {"description": "User created successfully"},
        403: {"description": "Current user is not an administrator"},
        409: {"description": "An account for this email already exists"},
    },
)
async def create_user(data: UserCreate, service: UserServiceDep, admin: AdminUserDep) -> UserRead:
    """
    Create a staff account.

    - **email**: Login name, unique ignoring case.
    - **password**: Plain password; only a salted hash is stored.
    - **first_name** / **last_name**: Display name.
    - **role**: One of `admin`, `baker`, `barista`.
    - **locked**: Locked accounts can no longer be modified or deleted.
    """
    saved = await service.save(admin, service.build(data))
    logger.info(f"User {saved.id} created by {admin.email}")
    return UserRead.model_validate(saved)


@router.put(
    "/{user_id}",
    response_model=UserRead,
    summary="Update User",
    description="Change fields of a staff account; a new password is re-hashed.",
    responses={
        200: {"description": "User updated successfully"},
        403: {"description": "Current user is not an administrator"},
        404: {"description": "User not found"},
        409: {"description": "Account is locked, email is taken or version is stale"},
    },
)
async def update_user(user_id: int, data: UserUpdate, service: UserServiceDep, admin: AdminUserDep) -> UserRead:
    user = service.apply_update(await service.load(user_id), data)
    return UserRead.model_validate(await service.save(admin, user))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete User",
    description="Delete a staff account other than your own.",
    responses={
        204: {"description": "User deleted"},
        403: {"description": "Current user is not an administrator"},
        404: {"description": "User not found"},
        409: {"description": "Account is locked or is your own"},
    },
)
async def delete_user(user_id: int, service: UserServiceDep, admin: AdminUserDep) -> None:
    await service.delete_by_id(admin, user_id)
