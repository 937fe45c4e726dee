"""
Order repository.

This module provides data access for orders: the customer-name / due-date
search used by the order list, the counters behind the delivery KPIs and the
grouped aggregates behind the sales dashboard.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Tuple

from sqlalchemy import extract, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_shop.core.models.domain.enums import OrderState
from bakery_shop.core.models.domain.paging import Page, PageRequest

from ..entities.orders import Order, OrderItem
from ..entities.products import Product
from .base import BaseRepository


class OrderRepository(BaseRepository[Order]):
    """Repository for order data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Order)

    # -----------------------------------------------------------------
    # Search
    # -----------------------------------------------------------------

    async def find_by_customer_full_name_containing_ignore_case(self, name: str, page: PageRequest) -> Page[Order]:
        return await self.find_page(page, Order.customer_full_name.icontains(name, autoescape=True))

    async def find_by_customer_full_name_containing_ignore_case_and_due_date_after(
        self, name: str, due_date: date, page: PageRequest
    ) -> Page[Order]:
        return await self.find_page(
            page,
            Order.customer_full_name.icontains(name, autoescape=True),
            Order.due_date > due_date,
        )

    async def find_by_due_date_after(self, due_date: date, page: PageRequest) -> Page[Order]:
        return await self.find_page(page, Order.due_date > due_date)

    async def find_by_due_date_greater_than_equal(self, due_date: date) -> List[Order]:
        """Orders due on or after ``due_date``, soonest first."""
        stmt = (
            select(Order)
            .where(Order.due_date >= due_date)
            .order_by(Order.due_date, Order.due_time, Order.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_customer_full_name_containing_ignore_case(self, name: str) -> int:
        return await self.count(Order.customer_full_name.icontains(name, autoescape=True))

    async def count_by_customer_full_name_containing_ignore_case_and_due_date_after(
        self, name: str, due_date: date
    ) -> int:
        return await self.count(
            Order.customer_full_name.icontains(name, autoescape=True),
            Order.due_date > due_date,
        )

    async def count_by_due_date_after(self, due_date: date) -> int:
        return await self.count(Order.due_date > due_date)

    # -----------------------------------------------------------------
    # Delivery KPIs
    # -----------------------------------------------------------------

    async def count_by_due_date(self, due_date: date) -> int:
        return await self.count(Order.due_date == due_date)

    async def count_by_due_date_and_state_in(self, due_date: date, states: Iterable[OrderState]) -> int:
        return await self.count(Order.due_date == due_date, Order.state.in_(list(states)))

    async def count_by_state(self, state: OrderState) -> int:
        return await self.count(Order.state == state)

    # -----------------------------------------------------------------
    # Dashboard aggregates
    # -----------------------------------------------------------------

    async def sum_per_month_last_three_years(self, state: OrderState, year: int) -> List[Tuple[int, int, int]]:
        """Revenue (quantity x price, in cents) per ``(year, month)`` for ``year`` and the two years before.

        Rows are ordered by year descending, then month ascending.
        """
        order_year = extract("year", Order.due_date)
        order_month = extract("month", Order.due_date)
        stmt = (
            select(order_year, order_month, func.sum(OrderItem.quantity * Product.price))
            .select_from(Order)
            .join(OrderItem, OrderItem.order_id == Order.id)
            .join(Product, Product.id == OrderItem.product_id)
            .where(Order.state == state, order_year <= year, order_year > year - 3)
            .group_by(order_year, order_month)
            .order_by(order_year.desc(), order_month)
        )
        result = await self.session.execute(stmt)
        return [(int(y), int(m), int(total)) for y, m, total in result.all()]

    async def count_per_month(self, state: OrderState, year: int) -> List[Tuple[int, int]]:
        """Number of orders in ``state`` per month (1-12) of ``year``."""
        order_month = extract("month", Order.due_date)
        stmt = (
            select(order_month, func.count(Order.id))
            .where(Order.state == state, extract("year", Order.due_date) == year)
            .group_by(order_month)
            .order_by(order_month)
        )
        result = await self.session.execute(stmt)
        return [(int(m), int(count)) for m, count in result.all()]

    async def count_per_day(self, state: OrderState, year: int, month: int) -> List[Tuple[int, int]]:
        """Number of orders in ``state`` per day of month for ``year``/``month``."""
        order_day = extract("day", Order.due_date)
        stmt = (
            select(order_day, func.count(Order.id))
            .where(
                Order.state == state,
                extract("year", Order.due_date) == year,
                extract("month", Order.due_date) == month,
            )
            .group_by(order_day)
            .order_by(order_day)
        )
        result = await self.session.execute(stmt)
        return [(int(d), int(count)) for d, count in result.all()]

    async def count_per_product(self, state: OrderState, year: int, month: int) -> List[Tuple[int, Product]]:
        """Total ordered quantity per product for orders in ``state`` due in ``year``/``month``.

        Rows are ordered by product id.
        """
        stmt = (
            select(func.sum(OrderItem.quantity), Product)
            .select_from(Order)
            .join(OrderItem, OrderItem.order_id == Order.id)
            .join(Product, Product.id == OrderItem.product_id)
            .where(
                Order.state == state,
                extract("year", Order.due_date) == year,
                extract("month", Order.due_date) == month,
            )
            .group_by(Product.id)
            .order_by(Product.id)
        )
        result = await self.session.execute(stmt)
        return [(int(total), product) for total, product in result.all()]
