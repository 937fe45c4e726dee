"""
Dashboard I/O models.

Aggregated delivery and sales figures for the reporting view. Positions with
no data are ``None`` so charts can tell "no data" apart from zero.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .products import ProductRead


class DeliveryStats(BaseModel):
    """Quick delivery KPIs for today."""

    delivered_today: int = 0
    due_today: int = 0
    due_tomorrow: int = 0
    not_available_today: int = 0
    new_orders: int = 0


class ProductDeliveries(BaseModel):
    """Delivered quantity of one product in the selected month."""

    product: ProductRead
    deliveries: int


class DashboardData(BaseModel):
    """Everything the dashboard shows for one selected month."""

    delivery_stats: DeliveryStats = Field(default_factory=DeliveryStats)
    deliveries_this_month: List[Optional[int]] = Field(
        default_factory=list, description="Delivered orders per day; index 0 is day 1"
    )
    deliveries_this_year: List[Optional[int]] = Field(
        default_factory=list, description="Delivered orders per month; index 0 is January"
    )
    sales_per_month: List[List[Optional[int]]] = Field(
        default_factory=list,
        description="Revenue in cents per month; row 0 is the selected year, rows 1-2 the years before",
    )
    product_deliveries: List[ProductDeliveries] = Field(
        default_factory=list, description="Delivered quantity per product, ordered by product id"
    )
