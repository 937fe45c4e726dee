"""
Pickup location entity model.
"""

from sqlmodel import Field

from ..base import EntityBase


class PickupLocation(EntityBase, table=True):
    """A physical location where an order may be collected.

    Table: pickup_locations
    """

    __tablename__ = "pickup_locations"
    __table_args__ = ({"extend_existing": True},)

    name: str = Field(max_length=255, unique=True, index=True)

    def __repr__(self) -> str:
        return f"PickupLocation(id={self.id}, name={self.name})"
