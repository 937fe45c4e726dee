"""
Database repository layer.

This package contains the repository classes, one per aggregate. Each builds
on ``BaseRepository`` for the generic CRUD operations and adds the derived
queries its service needs.

Modules:
- base: BaseRepository and QueryBuilder utilities
- users: Staff account repository
- products: Product repository
- pickup_locations: Pickup location repository
- orders: Order repository with dashboard aggregates
"""

from .base import BaseRepository, QueryBuilder
from .orders import OrderRepository
from .pickup_locations import PickupLocationRepository
from .products import ProductRepository
from .users import UserRepository

__all__ = [
    "BaseRepository",
    "OrderRepository",
    "PickupLocationRepository",
    "ProductRepository",
    "QueryBuilder",
    "UserRepository",
]
