"""Error types for the bakery backend.

Defines a small hierarchy of exceptions raised by the service layer to signal
missing entities, user-facing data problems and access violations.
"""

from __future__ import annotations

from typing import Optional


class BakeryError(Exception):
    """Base error for all bakery backend exceptions."""


class EntityNotFoundError(BakeryError):
    """Raised when an entity cannot be loaded or a ``None`` entity is deleted."""

    def __init__(self, entity_name: str = "Entity", entity_id: Optional[int] = None) -> None:
        self.entity_name = entity_name
        self.entity_id = entity_id
        if entity_id is None:
            super().__init__(f"{entity_name} not found")
        else:
            super().__init__(f"{entity_name} {entity_id} not found")


class UserFriendlyDataError(BakeryError):
    """Raised with a message that is safe to show to the end user as-is."""


class AccessDeniedError(BakeryError):
    """Raised when the current user's role does not allow an operation."""

    def __init__(self, message: str = "Operation not permitted for the current user") -> None:
        super().__init__(message)
