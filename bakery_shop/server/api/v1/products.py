"""
API endpoints for managing bakery products.

Products can be listed and searched by every staff member; creating, changing
and deleting them is reserved for administrators.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from bakery_shop.core.logging_config import get_logger
from bakery_shop.core.models.io import CountRead, PageRead, ProductCreate, ProductRead, ProductUpdate
from bakery_shop.server.services.deps import AdminUserDep, CurrentUserDep, PageRequestDep, ProductServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["products"])


@router.get(
    "",
    response_model=PageRead[ProductRead],
    summary="List Products",
    description="Retrieve one page of products, optionally filtered by a case-insensitive name fragment.",
    response_description="A page of product objects.",
    responses={
        200: {"description": "Products retrieved successfully"},
        401: {"description": "Missing or invalid credentials"},
    },
)
async def list_products(
    service: ProductServiceDep,
    current_user: CurrentUserDep,
    page: PageRequestDep,
    filter: Optional[str] = Query(default=None, description="Name fragment to search for"),
) -> PageRead[ProductRead]:
    """
    List products.

    - **filter**: Optional name fragment; matching ignores case. Omit it to list all products.
    - **page** / **size**: Zero-based page index and page size.
    - **sort**: Repeatable sort order such as `name` or `price,desc`.
    """
    result = await service.find_any_matching(filter, page)
    return PageRead[ProductRead].from_page(result, ProductRead.model_validate)


@router.get(
    "/count",
    response_model=CountRead,
    summary="Count Products",
    description="Count the products matching an optional name fragment.",
)
async def count_products(
    service: ProductServiceDep,
    current_user: CurrentUserDep,
    filter: Optional[str] = Query(default=None, description="Name fragment to search for"),
) -> CountRead:
    return CountRead(count=await service.count_any_matching(filter))


@router.get(
    "/new",
    response_model=ProductRead,
    summary="New Product Template",
    description="Return an unsaved product with its default values, for pre-filling an editor.",
)
async def new_product(service: ProductServiceDep, current_user: CurrentUserDep) -> ProductRead:
    return ProductRead.model_validate(service.create_new(current_user))


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    summary="Get Product by ID",
    description="Retrieve a specific product by its unique identifier.",
    responses={
        200: {"description": "Product found"},
        404: {"description": "Product not found"},
    },
)
async def get_product(product_id: int, service: ProductServiceDep, current_user: CurrentUserDep) -> ProductRead:
    return ProductRead.model_validate(await service.load(product_id))


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Product",
    description="Create a new product. Product names are unique. Administrators only.",
    response_description="The created product with its generated ID.",
    responses={
        201: {"description": "Product created successfully"},
        403: {"description": "Current user is not an administrator"},
        409: {"description": "A product with that name already exists"},
    },
)
async def create_product(data: ProductCreate, service: ProductServiceDep, admin: AdminUserDep) -> ProductRead:
    """
    Create a new product.

    - **name**: Unique product name, 2 to 255 characters.
    - **price**: Unit price in cents, between 0 and 100000.
    """
    product = service.create_new(admin)
    product.name = data.name
    product.price = data.price
    saved = await service.save(admin, product)
    logger.info(f"Product {saved.id} created by {admin.email}")
    return ProductRead.model_validate(saved)


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    summary="Update Product",
    description="Change a product's name and/or price. Administrators only.",
    responses={
        200: {"description": "Product updated successfully"},
        403: {"description": "Current user is not an administrator"},
        404: {"description": "Product not found"},
        409: {"description": "Duplicate name or stale version"},
    },
)
async def update_product(
    product_id: int, data: ProductUpdate, service: ProductServiceDep, admin: AdminUserDep
) -> ProductRead:
    """
    Update a product.

    Only non-null fields present in the request body are changed. Sending the
    `version` last seen by the client rejects the update when somebody else saved the
    product in the meantime.
    """
    product = await service.load(product_id)
    service.check_version(product, data.version)
    for key, value in data.model_dump(exclude_unset=True, exclude_none=True, exclude={"version"}).items():
        setattr(product, key, value)
    return ProductRead.model_validate(await service.save(admin, product))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Product",
    description="Delete a product. Administrators only.",
    responses={
        204: {"description": "Product deleted"},
        403: {"description": "Current user is not an administrator"},
        404: {"description": "Product not found"},
    },
)
async def delete_product(product_id: int, service: ProductServiceDep, admin: AdminUserDep) -> None:
    await service.delete_by_id(admin, product_id)
