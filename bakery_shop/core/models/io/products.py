"""
Product I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_PRICE_CENTS = 100000


class ProductRead(BaseModel):
    """Schema for reading a product from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    version: int = 0
    name: str = Field(description="Product name, unique")
    price: int = Field(description="Unit price in cents")


class ProductCreate(BaseModel):
    """Schema for creating a product via the API."""

    name: str = Field(min_length=2, max_length=255, description="Product name, unique")
    price: int = Field(ge=0, le=MAX_PRICE_CENTS, description="Unit price in cents")


class ProductUpdate(BaseModel):
    """Schema for updating a product via the API."""

    name: Optional[str] = Field(default=None, min_length=2, max_length=255)
    price: Optional[int] = Field(default=None, ge=0, le=MAX_PRICE_CENTS)
    version: Optional[int] = Field(default=None, description="Version the client last saw")
