"""
I/O models for API requests and responses.

These Pydantic schemas define the contract between the API and its clients.
Entities are converted with ``model_validate`` (``from_attributes``) or the
``from_entity`` helpers for the order projections.
"""

from .common import CountRead, PageRead
from .dashboard import DashboardData, DeliveryStats, ProductDeliveries
from .orders import (
    Customer,
    HistoryItemRead,
    OrderCommentCreate,
    OrderItemRead,
    OrderItemWrite,
    OrderRead,
    OrderStateChange,
    OrderSummaryRead,
    OrderWrite,
)
from .pickup_locations import PickupLocationCreate, PickupLocationRead, PickupLocationUpdate
from .products import ProductCreate, ProductRead, ProductUpdate
from .users import UserCreate, UserRead, UserUpdate

__all__ = [
    "CountRead",
    "Customer",
    "DashboardData",
    "DeliveryStats",
    "HistoryItemRead",
    "OrderCommentCreate",
    "OrderItemRead",
    "OrderItemWrite",
    "OrderRead",
    "OrderStateChange",
    "OrderSummaryRead",
    "OrderWrite",
    "PageRead",
    "PickupLocationCreate",
    "PickupLocationRead",
    "PickupLocationUpdate",
    "ProductCreate",
    "ProductDeliveries",
    "ProductRead",
    "ProductUpdate",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
