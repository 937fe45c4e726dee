"""
Order Service.

Business rules for orders: creating and updating orders filled in by the
order editor, adding comments to the history, searching and counting orders
by customer name and due date, and producing the aggregated dashboard data
(delivery KPIs, deliveries per day and month, sales per month and per
product).
"""

from __future__ import annotations

import calendar
import inspect
from datetime import date, time, timedelta
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple, Union

from sqlalchemy.ext.asyncio import AsyncSession

from bakery_shop.core.database.entities.orders import Order, OrderItem
from bakery_shop.core.database.entities.users import User
from bakery_shop.core.database.repositories.orders import OrderRepository
from bakery_shop.core.database.repositories.products import ProductRepository
from bakery_shop.core.errors import EntityNotFoundError
from bakery_shop.core.logging_config import get_logger
from bakery_shop.core.models.domain.enums import OrderState
from bakery_shop.core.models.domain.paging import Page, PageRequest
from bakery_shop.core.models.io.dashboard import DashboardData, DeliveryStats, ProductDeliveries
from bakery_shop.core.models.io.orders import OrderWrite
from bakery_shop.core.models.io.products import ProductRead
from bakery_shop.core.monitoring import log_order_event
from bakery_shop.server.core.config import settings

from .crud import CrudService
from .pickup_location_service import PickupLocationService

logger = get_logger(__name__)

OrderFiller = Callable[[User, Order], Union[None, Awaitable[None]]]

SALES_YEARS = 3
MONTHS_PER_YEAR = 12


class OrderService(CrudService[Order]):
    """Business operations for orders and the dashboard built on them."""

    entity_name = "Order"

    def __init__(
        self,
        session: AsyncSession,
        default_due_time: Optional[time] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        super().__init__(session)
        self._repository = OrderRepository(session)
        self._default_due_time = default_due_time or settings.default_due_time
        self._today = today

    @property
    def repository(self) -> OrderRepository:
        return self._repository

    # -----------------------------------------------------------------
    # Writes
    # -----------------------------------------------------------------

    async def save_order(self, current_user: User, order_id: Optional[int], order_filler: OrderFiller) -> Order:
        """Create (``order_id is None``) or load an order, let ``order_filler`` fill it in, then persist it.

        The filler may be a plain function or a coroutine function. Any
        exception rolls back the whole operation.
        """
        async with self.transaction():
            order = Order.placed_by(current_user) if order_id is None else await self.load(order_id)
            filled = order_filler(current_user, order)
            if inspect.isawaitable(filled):
                await filled
            saved = await self._repository.save(order)
        logger.info(f"Order {saved.id} saved by {current_user.email}")
        log_order_event(saved.id, "saved", current_user.email, saved.state.value)
        return saved

    async def persist(self, order: Order) -> Order:
        """Persist an already prepared order."""
        async with self.transaction():
            return await self._repository.save(order)

    async def add_comment(self, current_user: User, order: Order, comment: str) -> Order:
        """Append ``comment`` to the order history and persist the order."""
        order.add_history_item(current_user, comment)
        saved = await self.persist(order)
        log_order_event(saved.id, "commented", current_user.email, saved.state.value)
        return saved

    async def change_state(self, current_user: User, order: Order, state: OrderState) -> Order:
        """Move the order to ``state``, recording the change in its history."""
        if not order.change_state(current_user, state):
            return order
        saved = await self.persist(order)
        logger.info(f"Order {saved.id} moved to {state.value} by {current_user.email}")
        log_order_event(saved.id, "state changed", current_user.email, state.value)
        return saved

    def fill_from(self, data: OrderWrite) -> OrderFiller:
        """An order filler applying an editor payload (customer, due date/time, location, items)."""

        async def filler(current_user: User, order: Order) -> None:
            self.check_version(order, data.version)
            pickup_locations = PickupLocationService(self.session)
            if data.pickup_location_id is None:
                order.pickup_location = await pickup_locations.get_default()
            else:
                order.pickup_location = await pickup_locations.load(data.pickup_location_id)
            order.due_date = data.due_date
            order.due_time = data.due_time
            order.customer_full_name = data.customer.full_name
            order.customer_phone_number = data.customer.phone_number
            order.customer_details = data.customer.details
            order.paid = data.paid

            products = ProductRepository(self.session)
            items: List[OrderItem] = []
            for item in data.items:
                product = await products.get_by_id(item.product_id)
                if product is None:
                    raise EntityNotFoundError("Product", item.product_id)
                items.append(OrderItem(product=product, quantity=item.quantity, comment=item.comment))
            order.items = items

            if data.state is not None:
                order.change_state(current_user, data.state)

        return filler

    def create_new(self, current_user: Optional[User]) -> Order:
        """A new order due today at the default due time."""
        order = Order.placed_by(current_user)
        order.due_time = self._default_due_time
        order.due_date = self._today()
        return order

    # -----------------------------------------------------------------
    # Search
    # -----------------------------------------------------------------

    async def find_any_matching_after_due_date(
        self, filter: Optional[str], filter_date: Optional[date], page: PageRequest
    ) -> Page[Order]:
        """Orders whose customer name contains ``filter`` and/or that are due after ``filter_date``."""
        if filter:
            if filter_date is not None:
                return await self._repository.find_by_customer_full_name_containing_ignore_case_and_due_date_after(
                    filter, filter_date, page
                )
            return await self._repository.find_by_customer_full_name_containing_ignore_case(filter, page)
        if filter_date is not None:
            return await self._repository.find_by_due_date_after(filter_date, page)
        return await self._repository.find_all(page)

    async def count_any_matching_after_due_date(self, filter: Optional[str], filter_date: Optional[date]) -> int:
        if filter is not None and filter_date is not None:
            return await self._repository.count_by_customer_full_name_containing_ignore_case_and_due_date_after(
                filter, filter_date
            )
        if filter is not None:
            return await self._repository.count_by_customer_full_name_containing_ignore_case(filter)
        if filter_date is not None:
            return await self._repository.count_by_due_date_after(filter_date)
        return await self.count()

    async def find_any_matching_starting_today(self) -> List[Order]:
        """Orders due today or later."""
        return await self._repository.find_by_due_date_greater_than_equal(self._today())

    # -----------------------------------------------------------------
    # Dashboard
    # -----------------------------------------------------------------

    async def get_delivery_stats(self) -> DeliveryStats:
        today = self._today()
        return DeliveryStats(
            due_today=await self._repository.count_by_due_date(today),
            due_tomorrow=await self._repository.count_by_due_date(today + timedelta(days=1)),
            delivered_today=await self._repository.count_by_due_date_and_state_in(today, [OrderState.DELIVERED]),
            not_available_today=await self._repository.count_by_due_date_and_state_in(
                today, OrderState.not_available_states()
            ),
            new_orders=await self._repository.count_by_state(OrderState.NEW),
        )

    async def get_dashboard_data(self, month: int, year: int) -> DashboardData:
        """Delivery KPIs plus deliveries and sales figures for ``month``/``year``.

        Args:
            month: Selected month (1-12)
            year: Selected year

        Returns:
            DashboardData where positions without data are None
        """
        if not 1 <= month <= MONTHS_PER_YEAR:
            raise ValueError(f"Month must be between 1 and 12, got {month}")

        data = DashboardData(
            delivery_stats=await self.get_delivery_stats(),
            deliveries_this_month=await self._get_deliveries_per_day(month, year),
            deliveries_this_year=await self._get_deliveries_per_month(year),
        )

        sales_per_month: List[List[Optional[int]]] = [[None] * MONTHS_PER_YEAR for _ in range(SALES_YEARS)]
        for sales_year, sales_month, total in await self._repository.sum_per_month_last_three_years(
            OrderState.DELIVERED, year
        ):
            row = year - sales_year
            column = sales_month - 1
            if row == 0 and column == month - 1:
                # The selected month is still in progress
                continue
            sales_per_month[row][column] = total
        data.sales_per_month = sales_per_month

        data.product_deliveries = [
            ProductDeliveries(product=ProductRead.model_validate(product), deliveries=total)
            for total, product in await self._repository.count_per_product(OrderState.DELIVERED, year, month)
        ]
        return data

    async def _get_deliveries_per_day(self, month: int, year: int) -> List[Optional[int]]:
        days_in_month = calendar.monthrange(year, month)[1]
        return flatten_and_replace_missing_with_none(
            days_in_month, await self._repository.count_per_day(OrderState.DELIVERED, year, month)
        )

    async def _get_deliveries_per_month(self, year: int) -> List[Optional[int]]:
        return flatten_and_replace_missing_with_none(
            MONTHS_PER_YEAR, await self._repository.count_per_month(OrderState.DELIVERED, year)
        )


def flatten_and_replace_missing_with_none(length: int, rows: Sequence[Tuple[int, int]]) -> List[Optional[int]]:
    """Turn sparse ``(1-based position, value)`` rows into a dense list of ``length``."""
    counts: List[Optional[int]] = [None] * length
    for position, value in rows:
        counts[position - 1] = value
    return counts
