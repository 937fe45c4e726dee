"""
Database entity models.

Modules:
- users: Staff accounts
- products: Bakery products
- pickup_locations: Places where orders are collected
- orders: Order aggregate (orders, order items, status history)
"""

from .orders import HistoryItem, Order, OrderItem
from .pickup_locations import PickupLocation
from .products import Product
from .users import User

__all__ = [
    "HistoryItem",
    "Order",
    "OrderItem",
    "PickupLocation",
    "Product",
    "User",
]
