"""
Dashboard Endpoint.

Aggregated delivery KPIs and sales figures for a selected month.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from bakery_shop.core.models.io import DashboardData
from bakery_shop.server.services.deps import CurrentUserDep, OrderServiceDep

router = APIRouter(tags=["dashboard"])


@router.get(
    "",
    response_model=DashboardData,
    summary="Get Dashboard Data",
    description=(
        "Delivery KPIs for today plus delivered orders per day of the selected month, per month of the "
        "selected year, revenue per month for the selected year and the two before it, and delivered "
        "quantities per product in the selected month."
    ),
    response_description="Dashboard figures; positions without data are null.",
)
async def get_dashboard(
    service: OrderServiceDep,
    current_user: CurrentUserDep,
    month: Optional[int] = Query(default=None, ge=1, le=12, description="Selected month; defaults to the current"),
    year: Optional[int] = Query(default=None, ge=1, le=9999, description="Selected year; defaults to the current"),
) -> DashboardData:
    """
    Get dashboard data.

    Revenue for the selected month of the selected year is left out (null)
    because that month is still in progress.
    """
    today = date.today()
    return await service.get_dashboard_data(month or today.month, year or today.year)
