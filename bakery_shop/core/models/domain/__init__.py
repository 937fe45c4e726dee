"""Domain enums and value objects."""

from .enums import OrderState, Role
from .paging import Direction, Page, PageRequest, parse_sort

__all__ = ["Direction", "OrderState", "Page", "PageRequest", "Role", "parse_sort"]
