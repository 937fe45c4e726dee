"""
Pickup location I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PickupLocationRead(BaseModel):
    """Schema for reading a pickup location from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    version: int = 0
    name: str


class PickupLocationCreate(BaseModel):
    """Schema for creating a pickup location via the API."""

    name: str = Field(min_length=1, max_length=255)


class PickupLocationUpdate(BaseModel):
    """Schema for updating a pickup location via the API."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    version: Optional[int] = Field(default=None, description="Version the client last saw")
