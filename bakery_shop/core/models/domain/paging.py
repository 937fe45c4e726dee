"""Paging value objects shared by repositories and services."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index, page size and optional sort orders."""

    page: int = 0
    size: int = 20
    sort: Tuple[Tuple[str, Direction], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("Page index must not be less than zero")
        if self.size < 1:
            raise ValueError("Page size must not be less than one")

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(cls, page: int, size: int, *sort: str) -> PageRequest:
        """Build a request from ``"field"`` / ``"field,desc"`` sort expressions."""
        return cls(page=page, size=size, sort=parse_sort(sort))


def parse_sort(expressions: Sequence[str]) -> Tuple[Tuple[str, Direction], ...]:
    """Parse ``["name", "price,desc"]`` into ``(("name", ASC), ("price", DESC))``."""
    orders: List[Tuple[str, Direction]] = []
    for expression in expressions:
        if not expression:
            continue
        name, _, direction = expression.partition(",")
        orders.append((name.strip(), Direction(direction.strip().lower() or "asc")))
    return tuple(orders)


@dataclass
class Page(Generic[T]):
    """One page of results plus the total number of matching rows."""

    items: List[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
