"""Shared fixtures for unit tests.

Provides an in-memory SQLite database with the full schema plus small
factories that persist users, products, pickup locations and orders.
"""

from __future__ import annotations

from datetime import date, time
from typing import AsyncGenerator, Iterable, Optional, Tuple

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from bakery_shop.core.database import create_all, create_sessionmaker
from bakery_shop.core.database.entities import Order, OrderItem, PickupLocation, Product, User
from bakery_shop.core.models.domain.enums import OrderState, Role
from bakery_shop.server.services.passwords import hash_password

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_PASSWORD = "secret"


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine with every table."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with create_sessionmaker(in_memory_engine)() as session:
        yield session


@pytest.fixture
def make_user(in_memory_session: AsyncSession):
    """Persist a staff account whose password is ``TEST_PASSWORD``."""

    async def _make(email: str, role: Role = Role.BARISTA, locked: bool = False, **fields) -> User:
        user = User(
            email=email,
            password_hash=hash_password(TEST_PASSWORD, iterations=1000),
            first_name=fields.pop("first_name", "Test"),
            last_name=fields.pop("last_name", "User"),
            role=role,
            locked=locked,
            **fields,
        )
        in_memory_session.add(user)
        await in_memory_session.commit()
        return user

    return _make


@pytest.fixture
def make_product(in_memory_session: AsyncSession):
    async def _make(name: str, price: int = 100) -> Product:
        product = Product(name=name, price=price)
        in_memory_session.add(product)
        await in_memory_session.commit()
        return product

    return _make


@pytest.fixture
def make_location(in_memory_session: AsyncSession):
    async def _make(name: str) -> PickupLocation:
        location = PickupLocation(name=name)
        in_memory_session.add(location)
        await in_memory_session.commit()
        return location

    return _make


@pytest.fixture
def make_order(in_memory_session: AsyncSession):
    """Persist an order placed by ``user`` with ``(product, quantity)`` lines."""

    async def _make(
        user: User,
        due_date: date,
        items: Iterable[Tuple[Product, int]] = (),
        state: OrderState = OrderState.NEW,
        customer: str = "Jane Doe",
        location: Optional[PickupLocation] = None,
        due_time: time = time(16, 0),
    ) -> Order:
        order = Order.placed_by(user)
        order.due_date = due_date
        order.due_time = due_time
        order.customer_full_name = customer
        order.customer_phone_number = "+358-40-1234567"
        order.pickup_location = location
        order.state = state
        order.items = [OrderItem(product=product, quantity=quantity) for product, quantity in items]
        in_memory_session.add(order)
        await in_memory_session.commit()
        return order

    return _make
