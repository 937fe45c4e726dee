"""
Shared I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Callable, Generic, List, TypeVar

from pydantic import BaseModel, Field

from bakery_shop.core.models.domain.paging import Page

ItemT = TypeVar("ItemT")


class PageRead(BaseModel, Generic[ItemT]):
    """Schema for one page of results."""

    items: List[ItemT] = Field(description="Entities on this page")
    total: int = Field(description="Number of entities matching the filter")
    page: int = Field(description="Zero-based page index")
    size: int = Field(description="Requested page size")
    total_pages: int = Field(description="Number of pages for this page size")

    @classmethod
    def from_page(cls, page: Page, convert: Callable) -> "PageRead":
        return cls(
            items=[convert(item) for item in page.items],
            total=page.total,
            page=page.page,
            size=page.size,
            total_pages=page.total_pages,
        )


class CountRead(BaseModel):
    """Schema for a count response."""

    count: int
