"""
API endpoints for managing customer orders.

Provides the storefront search (customer name and due date), the upcoming
orders list, the order editor's create/replace operations, comments and state
changes. Every change is recorded in the order's history together with the
staff member who made it.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Query, status

from bakery_shop.core.logging_config import get_logger
from bakery_shop.core.models.io import (
    CountRead,
    OrderCommentCreate,
    OrderRead,
    OrderStateChange,
    OrderSummaryRead,
    OrderWrite,
    PageRead,
)
from bakery_shop.server.services.deps import CurrentUserDep, OrderServiceDep, PageRequestDep

logger = get_logger(__name__)

router = APIRouter(tags=["orders"])


@router.get(
    "",
    response_model=PageRead[OrderSummaryRead],
    summary="Search Orders",
    description="Retrieve one page of orders filtered by customer name and/or a due date lower bound.",
    response_description="A page of order summaries.",
    responses={
        200: {"description": "Orders retrieved successfully"},
        401: {"description": "Missing or invalid credentials"},
    },
)
async def list_orders(
    service: OrderServiceDep,
    current_user: CurrentUserDep,
    page: PageRequestDep,
    filter: Optional[str] = Query(default=None, description="Fragment of the customer's full name"),
    due_after: Optional[date] = Query(default=None, description="Only orders due strictly after this date"),
) -> PageRead[OrderSummaryRead]:
    """
    Search orders.

    - **filter**: Customer name fragment; matching ignores case. An empty value matches every order.
    - **due_after**: Only return orders due after this date (exclusive).
    - **page** / **size** / **sort**: Standard paging parameters, e.g. `sort=due_date&sort=due_time`.
    """
    result = await service.find_any_matching_after_due_date(filter, due_after, page)
    return PageRead[OrderSummaryRead].from_page(result, OrderSummaryRead.from_entity)


@router.get(
    "/count",
    response_model=CountRead,
    summary="Count Orders",
    description="Count orders matching a customer name fragment and/or due date lower bound.",
)
async def count_orders(
    service: OrderServiceDep,
    current_user: CurrentUserDep,
    filter: Optional[str] = Query(default=None, description="Fragment of the customer's full name"),
    due_after: Optional[date] = Query(default=None, description="Only orders due strictly after this date"),
) -> CountRead:
    return CountRead(count=await service.count_any_matching_after_due_date(filter, due_after))


@router.get(
    "/upcoming",
    response_model=List[OrderSummaryRead],
    summary="Upcoming Orders",
    description="All orders due today or later, soonest first.",
)
async def upcoming_orders(service: OrderServiceDep, current_user: CurrentUserDep) -> List[OrderSummaryRead]:
    orders = await service.find_any_matching_starting_today()
    logger.debug(f"Found {len(orders)} upcoming orders")
    return [OrderSummaryRead.from_entity(order) for order in orders]


@router.get(
    "/new",
    response_model=OrderRead,
    summary="New Order Template",
    description="Return an unsaved order due today at the default due time, placed by the current user.",
)
async def new_order(service: OrderServiceDep, current_user: CurrentUserDep) -> OrderRead:
    return OrderRead.from_entity(service.create_new(current_user))


@router.get(
    "/{order_id}",
    response_model=OrderRead,
    summary="Get Order by ID",
    description="Retrieve an order with its items and full history.",
    responses={
        200: {"description": "Order found"},
        404: {"description": "Order not found"},
    },
)
async def get_order(order_id: int, service: OrderServiceDep, current_user: CurrentUserDep) -> OrderRead:
    return OrderRead.from_entity(await service.load(order_id))


@router.post(
    "",
    response_model=OrderRead,
    status_code=status.HTTP_201_CREATED,
    summary="Place Order",
    description="Place a new order. Its history starts with an 'Order placed' entry by the current user.",
    response_description="The stored order with its generated ID.",
    responses={
        201: {"description": "Order placed successfully"},
        404: {"description": "Referenced product or pickup location not found"},
    },
)
async def create_order(data: OrderWrite, service: OrderServiceDep, current_user: CurrentUserDep) -> OrderRead:
    """
    Place a new order.

    - **due_date** / **due_time**: When the customer collects the order.
    - **pickup_location_id**: Where the order is collected; the default location when omitted.
    - **customer**: Full name, phone number and optional details.
    - **items**: At least one product line with quantity and optional comment.
    - **paid**: Whether the order has already been paid.
    - **state**: Optional initial state other than `NEW`.
    """
    order = await service.save_order(current_user, None, service.fill_from(data))
    return OrderRead.from_entity(order)


@router.put(
    "/{order_id}",
    response_model=OrderRead,
    summary="Update Order",
    description="Replace the editable fields and the items of an existing order.",
    responses={
        200: {"description": "Order updated successfully"},
        404: {"description": "Order, product or pickup location not found"},
        409: {"description": "Somebody else updated the order in the meantime"},
    },
)
async def update_order(
    order_id: int, data: OrderWrite, service: OrderServiceDep, current_user: CurrentUserDep
) -> OrderRead:
    order = await service.save_order(current_user, order_id, service.fill_from(data))
    return OrderRead.from_entity(order)


@router.post(
    "/{order_id}/comments",
    response_model=OrderRead,
    summary="Comment on Order",
    description="Append a comment to the order history, tagged with the order's current state.",
    responses={
        200: {"description": "Comment added"},
        404: {"description": "Order not found"},
    },
)
async def add_order_comment(
    order_id: int, data: OrderCommentCreate, service: OrderServiceDep, current_user: CurrentUserDep
) -> OrderRead:
    order = await service.add_comment(current_user, await service.load(order_id), data.message)
    return OrderRead.from_entity(order)


@router.post(
    "/{order_id}/state",
    response_model=OrderRead,
    summary="Change Order State",
    description="Move an order to another state; the change is recorded in the history.",
    responses={
        200: {"description": "State changed (or already in the requested state)"},
        404: {"description": "Order not found"},
    },
)
async def change_order_state(
    order_id: int, data: OrderStateChange, service: OrderServiceDep, current_user: CurrentUserDep
) -> OrderRead:
    order = await service.change_state(current_user, await service.load(order_id), data.state)
    return OrderRead.from_entity(order)


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Order",
    description="Delete an order together with its items and history.",
    responses={
        204: {"description": "Order deleted"},
        404: {"description": "Order not found"},
    },
)
async def delete_order(order_id: int, service: OrderServiceDep, current_user: CurrentUserDep) -> None:
    await service.delete_by_id(current_user, order_id)
