"""
User I/O models for API requests and responses.

Password hashes never leave the server; only the plain password is accepted
on create/update.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from bakery_shop.core.models.domain.enums import Role

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    version: int = 0
    email: str
    first_name: str
    last_name: str
    role: Role
    locked: bool


class UserCreate(BaseModel):
    """Schema for creating a user via the API."""

    email: str = Field(max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1, max_length=255)
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    role: Role = Role.BARISTA
    locked: bool = False


class UserUpdate(BaseModel):
    """Schema for updating a user via the API."""

    email: Optional[str] = Field(default=None, max_length=255, pattern=EMAIL_PATTERN)
    password: Optional[str] = Field(default=None, min_length=1, max_length=255)
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    role: Optional[Role] = None
    locked: Optional[bool] = None
    version: Optional[int] = Field(default=None, description="Version the client last saw")
