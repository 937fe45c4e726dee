"""Initial schema and seed data for the bakery shop

Revision ID: 20261001_000000
Revises: None
Create Date: 2026-10-01 00:00:00.000000

This is the initial migration that creates all tables and seeds default data:
- users, products, pickup_locations
- orders with their order_items and order_history
- Default pickup locations ("Store", "Bakery")

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261001_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ORDER_STATES = ("NEW", "CONFIRMED", "READY", "DELIVERED", "PROBLEM", "CANCELLED")
ROLES = ("ADMIN", "BAKER", "BARISTA")


def upgrade() -> None:
    """Create all tables and seed initial data."""

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("role", sa.Enum(*ROLES, name="role"), nullable=False),
        sa.Column("locked", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_products_name", "products", ["name"], unique=True)

    op.create_table(
        "pickup_locations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_pickup_locations_name", "pickup_locations", ["name"], unique=True)

    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("due_time", sa.Time(), nullable=False),
        sa.Column("pickup_location_id", sa.Integer(), sa.ForeignKey("pickup_locations.id"), nullable=True),
        sa.Column("customer_full_name", sa.String(255), nullable=False),
        sa.Column("customer_phone_number", sa.String(20), nullable=False),
        sa.Column("customer_details", sa.String(255), nullable=True),
        sa.Column("state", sa.Enum(*ORDER_STATES, name="orderstate"), nullable=False),
        sa.Column("paid", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_orders_due_date", "orders", ["due_date"])
    op.create_index("ix_orders_customer_full_name", "orders", ["customer_full_name"])
    op.create_index("ix_orders_state", "orders", ["state"])

    op.create_table(
        "order_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("order_id", sa.Integer(), sa.ForeignKey("orders.id", ondelete="CASCADE"), nullable=True),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("comment", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_order_items_order_id", "order_items", ["order_id"])

    op.create_table(
        "order_history",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("order_id", sa.Integer(), sa.ForeignKey("orders.id", ondelete="CASCADE"), nullable=True),
        sa.Column("order_state", sa.Enum(*ORDER_STATES, name="orderstate", create_type=False), nullable=False),
        sa.Column("message", sa.String(255), nullable=False),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
        sa.Column("created_by_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_order_history_order_id", "order_history", ["order_id"])

    # Seed default pickup locations
    pickup_locations = sa.table(
        "pickup_locations",
        sa.column("version", sa.Integer),
        sa.column("name", sa.String),
    )
    op.bulk_insert(pickup_locations, [{"version": 0, "name": "Store"}, {"version": 0, "name": "Bakery"}])


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("order_history")
    op.drop_table("order_items")
    op.drop_table("orders")
    op.drop_table("pickup_locations")
    op.drop_table("products")
    op.drop_table("users")

    # Enum types only exist as separate objects on PostgreSQL
    if op.get_bind().dialect.name == "postgresql":
        op.execute("DROP TYPE IF EXISTS orderstate")
        op.execute("DROP TYPE IF EXISTS role")
