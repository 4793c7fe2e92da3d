"""Dashboard and report API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from finyx.application.services import DashboardService
from finyx.core.dependencies import get_dashboard_service
from finyx.presentation.schemas import (
    DashboardSchema,
    ErrorResponseSchema,
    ReportSchema,
)

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"

MonthQuery = Annotated[
    Optional[str],
    Query(
        pattern=MONTH_PATTERN,
        description="Reference month (YYYY-MM), defaults to the current month",
        examples=["2026-10"],
    ),
]

dashboard_router = APIRouter(
    responses={
        500: {"model": ErrorResponseSchema, "description": "Unexpected error"},
    },
)


@dashboard_router.get(
    "/dashboard",
    response_model=DashboardSchema,
    summary="Get Dashboard",
    description="""
    Month summary, recent transactions and chart data.

    The first request loads the transactions from the store. When the
    store is not configured or unreachable the response carries
    state="error" and a notice with a retry path instead of figures.
    """,
)
async def get_dashboard(
    dashboard_service: Annotated[DashboardService, Depends(get_dashboard_service)],
    month: MonthQuery = None,
) -> DashboardSchema:
    view = await dashboard_service.get_dashboard(month)
    return DashboardSchema.model_validate(view)


@dashboard_router.post(
    "/dashboard/reload",
    response_model=DashboardSchema,
    summary="Reload Dashboard",
    description="Reload the transactions from the store (user-initiated retry).",
)
async def reload_dashboard(
    dashboard_service: Annotated[DashboardService, Depends(get_dashboard_service)],
    month: MonthQuery = None,
) -> DashboardSchema:
    view = await dashboard_service.reload(month)
    return DashboardSchema.model_validate(view)


@dashboard_router.get(
    "/reports",
    response_model=ReportSchema,
    summary="Get Reports",
    description="Expenses by category for the month and the monthly evolution.",
)
async def get_report(
    dashboard_service: Annotated[DashboardService, Depends(get_dashboard_service)],
    month: MonthQuery = None,
) -> ReportSchema:
    view = await dashboard_service.get_report(month)
    return ReportSchema.model_validate(view)
