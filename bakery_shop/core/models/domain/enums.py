"""Order and user role enumerations."""

from __future__ import annotations

from enum import Enum


class OrderState(str, Enum):
    """Lifecycle states of an order."""

    NEW = "NEW"
    CONFIRMED = "CONFIRMED"
    READY = "READY"
    DELIVERED = "DELIVERED"
    PROBLEM = "PROBLEM"
    CANCELLED = "CANCELLED"

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. ``Delivered``."""
        return self.value.capitalize()

    @classmethod
    def not_available_states(cls) -> frozenset[OrderState]:
        """States in which an order due today is not (yet) available for pickup."""
        return frozenset(cls) - {cls.DELIVERED, cls.READY, cls.CANCELLED}


class Role(str, Enum):
    """Staff roles."""

    ADMIN = "admin"
    BAKER = "baker"
    BARISTA = "barista"
