"""
Order entity models.

This module contains the order aggregate:

- Order: customer, due date/time, pickup location and state
- OrderItem: a product line with quantity and optional comment
- HistoryItem: an entry of the order's status history

Relationships are loaded eagerly (``selectin``) because entities are used
outside the session's greenlet by the async API layer.
"""

from datetime import date, datetime, time
from typing import List, Optional

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field, Relationship

from bakery_shop.core.models.domain.enums import OrderState

from ..base import Base, EntityBase
from .pickup_locations import PickupLocation
from .products import Product
from .users import User


class OrderItem(Base, table=True):
    """One product line of an order.

    Table: order_items
    """

    __tablename__ = "order_items"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), index=True),
    )
    product_id: Optional[int] = Field(default=None, foreign_key="products.id")
    quantity: int = Field(default=1)
    comment: Optional[str] = Field(default=None, max_length=255)

    order: Optional["Order"] = Relationship(back_populates="items")
    product: Optional[Product] = Relationship(sa_relationship_kwargs={"lazy": "selectin"})

    @property
    def total_price(self) -> int:
        """Line total in cents."""
        if self.product is None:
            return 0
        return self.quantity * self.product.price


class HistoryItem(Base, table=True):
    """An entry of an order's status history.

    Table: order_history
    """

    __tablename__ = "order_history"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), index=True),
    )
    order_state: OrderState = Field(default=OrderState.NEW)
    message: str = Field(default="", max_length=255)
    timestamp: datetime = Field(default_factory=datetime.now)
    created_by_id: Optional[int] = Field(default=None, foreign_key="users.id")

    order: Optional["Order"] = Relationship(back_populates="history")
    created_by: Optional[User] = Relationship(sa_relationship_kwargs={"lazy": "selectin"})


class Order(EntityBase, table=True):
    """Persistent customer order.

    Table: orders
    """

    __tablename__ = "orders"
    __table_args__ = ({"extend_existing": True},)

    due_date: date = Field(default_factory=date.today, index=True)
    due_time: time = Field(default=time(16, 0))
    pickup_location_id: Optional[int] = Field(default=None, foreign_key="pickup_locations.id")
    customer_full_name: str = Field(default="", max_length=255, index=True)
    customer_phone_number: str = Field(default="", max_length=20)
    customer_details: Optional[str] = Field(default=None, max_length=255)
    state: OrderState = Field(default=OrderState.NEW, index=True)
    paid: bool = Field(default=False)

    pickup_location: Optional[PickupLocation] = Relationship(sa_relationship_kwargs={"lazy": "selectin"})
    items: List[OrderItem] = Relationship(
        back_populates="order",
        sa_relationship_kwargs={
            "lazy": "selectin",
            "cascade": "all, delete-orphan",
            "order_by": "OrderItem.id",
        },
    )
    history: List[HistoryItem] = Relationship(
        back_populates="order",
        sa_relationship_kwargs={
            "lazy": "selectin",
            "cascade": "all, delete-orphan",
            "order_by": "HistoryItem.id",
        },
    )

    @classmethod
    def placed_by(cls, created_by: Optional[User]) -> "Order":
        """A fresh ``NEW`` order whose history starts with "Order placed"."""
        order = cls(state=OrderState.NEW)
        order.add_history_item(created_by, "Order placed")
        return order

    @property
    def total_price(self) -> int:
        """Order total in cents."""
        return sum(item.total_price for item in self.items)

    def add_history_item(self, created_by: Optional[User], message: str) -> HistoryItem:
        """Append a history entry carrying the current state."""
        item = HistoryItem(
            order_state=self.state,
            message=message,
            timestamp=datetime.now(),
            created_by=created_by,
            created_by_id=created_by.id if created_by is not None else None,
        )
        self.history.append(item)
        return item

    def change_state(self, user: User, state: OrderState) -> bool:
        """Move to ``state`` and record it; returns False when nothing changed."""
        if self.state == state:
            return False
        self.state = state
        self.add_history_item(user, f"Order {state.display_name}")
        return True

    def __repr__(self) -> str:
        return f"Order(id={self.id}, customer={self.customer_full_name}, due={self.due_date}, state={self.state.value})"
