"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the centralized database layer using SQLModel.
"""

from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict
from sqlmodel import Field, SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


class EntityBase(Base):
    """Identity and version columns shared by every persisted entity.

    ``version`` is bumped by the repository on each update of an existing row.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    version: int = Field(default=0)
