"""
User entity model.

Staff accounts that sign in to the bakery backend. The role decides which
operations are available (only admins manage users and products).
"""

from sqlmodel import Field

from bakery_shop.core.models.domain.enums import Role

from ..base import EntityBase


class User(EntityBase, table=True):
    """Persistent staff account.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    email: str = Field(max_length=255, unique=True, index=True, description="Login email, unique")
    password_hash: str = Field(default="", max_length=255, description="Salted PBKDF2 hash of the password")
    first_name: str = Field(default="", max_length=255)
    last_name: str = Field(default="", max_length=255)
    role: Role = Field(default=Role.BARISTA, description="Staff role")
    locked: bool = Field(default=False, description="Locked accounts cannot be modified or deleted")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, role={self.role.value})"
