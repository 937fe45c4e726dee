"""
API endpoints for managing pickup locations.

Every staff member can browse pickup locations and look up the default one
used for new orders; administrators maintain the list.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from bakery_shop.core.logging_config import get_logger
from bakery_shop.core.models.io import (
    CountRead,
    PageRead,
    PickupLocationCreate,
    PickupLocationRead,
    PickupLocationUpdate,
)
from bakery_shop.server.services.deps import (
    AdminUserDep,
    CurrentUserDep,
    PageRequestDep,
    PickupLocationServiceDep,
)

logger = get_logger(__name__)

router = APIRouter(tags=["pickup-locations"])


@router.get(
    "",
    response_model=PageRead[PickupLocationRead],
    summary="List Pickup Locations",
    description="Retrieve one page of pickup locations, optionally filtered by a case-insensitive name fragment.",
    response_description="A page of pickup location objects.",
)
async def list_pickup_locations(
    service: PickupLocationServiceDep,
    current_user: CurrentUserDep,
    page: PageRequestDep,
    filter: Optional[str] = Query(default=None, description="Name fragment to search for"),
) -> PageRead[PickupLocationRead]:
    """
    List pickup locations.

    - **filter**: Optional name fragment; matching ignores case.
    - **page** / **size** / **sort**: Standard paging parameters.
    """
    result = await service.find_any_matching(filter, page)
    return PageRead[PickupLocationRead].from_page(result, PickupLocationRead.model_validate)


@router.get(
    "/count",
    response_model=CountRead,
    summary="Count Pickup Locations",
    description="Count the pickup locations matching an optional name fragment.",
)
async def count_pickup_locations(
    service: PickupLocationServiceDep,
    current_user: CurrentUserDep,
    filter: Optional[str] = Query(default=None, description="Name fragment to search for"),
) -> CountRead:
    return CountRead(count=await service.count_any_matching(filter))


@router.get(
    "/default",
    response_model=PickupLocationRead,
    summary="Get Default Pickup Location",
    description="Retrieve the pickup location assigned to new orders when none is chosen.",
    responses={
        200: {"description": "Default pickup location found"},
        404: {"description": "No pickup location has been set up"},
    },
)
async def get_default_pickup_location(
    service: PickupLocationServiceDep, current_user: CurrentUserDep
) -> PickupLocationRead:
    return PickupLocationRead.model_validate(await service.get_default())


@router.get(
    "/new",
    response_model=PickupLocationRead,
    summary="New Pickup Location Template",
    description="Return an unsaved pickup location with its default values.",
)
async def new_pickup_location(service: PickupLocationServiceDep, current_user: CurrentUserDep) -> PickupLocationRead:
    return PickupLocationRead.model_validate(service.create_new(current_user))


@router.get(
    "/{location_id}",
    response_model=PickupLocationRead,
    summary="Get Pickup Location by ID",
    description="Retrieve a specific pickup location by its unique identifier.",
    responses={
        200: {"description": "Pickup location found"},
        404: {"description": "Pickup location not found"},
    },
)
async def get_pickup_location(
    location_id: int, service: PickupLocationServiceDep, current_user: CurrentUserDep
) -> PickupLocationRead:
    return PickupLocationRead.model_validate(await service.load(location_id))


@router.post(
    "",
    response_model=PickupLocationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Pickup Location",
    description="Create a new pickup location. Names are unique. Administrators only.",
    responses={
        201: {"description": "Pickup location created successfully"},
        403: {"description": "Current user is not an administrator"},
        409: {"description": "A pickup location with that name already exists"},
    },
)
async def create_pickup_location(
    data: PickupLocationCreate, service: PickupLocationServiceDep, admin: AdminUserDep
) -> PickupLocationRead:
    location = service.create_new(admin)
    location.name = data.name
    saved = await service.save(admin, location)
    logger.info(f"Pickup location {saved.id} created by {admin.email}")
    return PickupLocationRead.model_validate(saved)


@router.put(
    "/{location_id}",
    response_model=PickupLocationRead,
    summary="Update Pickup Location",
    description="Rename a pickup location. Administrators only.",
    responses={
        200: {"description": "Pickup location updated successfully"},
        403: {"description": "Current user is not an administrator"},
        404: {"description": "Pickup location not found"},
        409: {"description": "Duplicate name or stale version"},
    },
)
async def update_pickup_location(
    location_id: int, data: PickupLocationUpdate, service: PickupLocationServiceDep, admin: AdminUserDep
) -> PickupLocationRead:
    location = await service.load(location_id)
    service.check_version(location, data.version)
    if data.name is not None:
        location.name = data.name
    return PickupLocationRead.model_validate(await service.save(admin, location))


@router.delete(
    "/{location_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Pickup Location",
    description="Delete a pickup location that no order refers to. Administrators only.",
    responses={
        204: {"description": "Pickup location deleted"},
        403: {"description": "Current user is not an administrator"},
        404: {"description": "Pickup location not found"},
        409: {"description": "Pickup location is still used by orders"},
    },
)
async def delete_pickup_location(location_id: int, service: PickupLocationServiceDep, admin: AdminUserDep) -> None:
    await service.delete_by_id(admin, location_id)
