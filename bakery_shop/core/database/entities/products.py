"""
Product entity model.

Products are the bakery goods that can be put on an order. Prices are stored
as integer cents.
"""

from sqlmodel import Field

from ..base import EntityBase


class Product(EntityBase, table=True):
    """Persistent bakery product.

    Table: products
    """

    __tablename__ = "products"
    __table_args__ = ({"extend_existing": True},)

    name: str = Field(max_length=255, unique=True, index=True, description="Product name, unique")
    price: int = Field(default=0, description="Unit price in cents")

    def __repr__(self) -> str:
        return f"Product(id={self.id}, name={self.name}, price={self.price})"
