"""
Order I/O models for API requests and responses.

This module contains the read models for full orders and order summaries and
the write models used by the order editor (customer, items, due date/time),
plus the small payloads for comments and state changes.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from bakery_shop.core.models.domain.enums import OrderState

from .pickup_locations import PickupLocationRead
from .products import ProductRead

PHONE_PATTERN = r"^(\+\d+)?([-]?[\d]+)*$"


class Customer(BaseModel):
    """Customer details embedded in an order."""

    full_name: str = Field(default="", max_length=255)
    phone_number: str = Field(default="", max_length=20, pattern=PHONE_PATTERN)
    details: Optional[str] = Field(default=None, max_length=255)


class HistoryAuthor(BaseModel):
    """The staff member who created a history entry."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    email: str
    first_name: str
    last_name: str


class HistoryItemRead(BaseModel):
    """Schema for reading one entry of an order's status history."""

    model_config = ConfigDict(from_attributes=True)

    order_state: OrderState
    message: str
    timestamp: datetime
    created_by: Optional[HistoryAuthor] = None


class OrderItemRead(BaseModel):
    """Schema for reading one product line of an order."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    product: Optional[ProductRead] = None
    quantity: int
    comment: Optional[str] = None
    total_price: int = Field(description="Line total in cents")


class OrderSummaryRead(BaseModel):
    """Projection of an order used by the storefront list."""

    id: Optional[int] = None
    due_date: date
    due_time: time
    pickup_location: Optional[PickupLocationRead] = None
    state: OrderState
    customer: Customer
    items: List[OrderItemRead]
    total_price: int = Field(description="Order total in cents")

    @classmethod
    def from_entity(cls, order) -> "OrderSummaryRead":
        return cls(
            id=order.id,
            due_date=order.due_date,
            due_time=order.due_time,
            pickup_location=(
                PickupLocationRead.model_validate(order.pickup_location) if order.pickup_location else None
            ),
            state=order.state,
            customer=customer_of(order),
            items=[OrderItemRead.model_validate(item) for item in order.items],
            total_price=order.total_price,
        )


class OrderRead(OrderSummaryRead):
    """Schema for reading a full order, including its history."""

    version: int = 0
    paid: bool = False
    history: List[HistoryItemRead] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, order) -> "OrderRead":
        summary = OrderSummaryRead.from_entity(order)
        return cls(
            **summary.model_dump(exclude={"pickup_location", "customer", "items"}),
            pickup_location=summary.pickup_location,
            customer=summary.customer,
            items=summary.items,
            version=order.version,
            paid=order.paid,
            history=[HistoryItemRead.model_validate(item) for item in order.history],
        )


class OrderItemWrite(BaseModel):
    """Schema for one product line when saving an order."""

    product_id: int
    quantity: int = Field(default=1, ge=1)
    comment: Optional[str] = Field(default=None, max_length=255)


class OrderWrite(BaseModel):
    """Schema for creating or replacing an order via the API."""

    due_date: date
    due_time: time
    pickup_location_id: Optional[int] = Field(
        default=None, description="Pickup location; the default location is used when omitted"
    )
    customer: Customer
    items: List[OrderItemWrite] = Field(min_length=1)
    paid: bool = False
    state: Optional[OrderState] = Field(default=None, description="Target state; recorded in the history")
    version: Optional[int] = Field(default=None, description="Version the client last saw")


class OrderCommentCreate(BaseModel):
    """Schema for adding a comment to an order's history."""

    message: str = Field(min_length=1, max_length=255)


class OrderStateChange(BaseModel):
    """Schema for moving an order to another state."""

    state: OrderState


def customer_of(order) -> Customer:
    """Build the embedded customer model from an order entity's columns."""
    return Customer.model_construct(
        full_name=order.customer_full_name,
        phone_number=order.customer_phone_number,
        details=order.customer_details,
    )
