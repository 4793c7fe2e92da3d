"""Transaction API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from finyx.application.dto import TransactionRequest
from finyx.application.services import DashboardService, DashboardSession
from finyx.core.dependencies import get_dashboard_service, get_dashboard_session
from finyx.presentation.schemas import (
    ErrorResponseSchema,
    TransactionCreateSchema,
    TransactionListSchema,
    TransactionSchema,
)

transactions_router = APIRouter(
    prefix="/transactions",
    responses={
        503: {"model": ErrorResponseSchema, "description": "Store unavailable"},
    },
)


@transactions_router.get(
    "",
    response_model=TransactionListSchema,
    summary="List Transactions",
    description="All loaded transactions, most recent first.",
)
async def list_transactions(
    dashboard_service: Annotated[DashboardService, Depends(get_dashboard_service)],
    session: Annotated[DashboardSession, Depends(get_dashboard_session)],
) -> TransactionListSchema:
    views = await dashboard_service.list_transactions()
    return TransactionListSchema(
        state=session.state.value,
        transactions=[TransactionSchema.model_validate(v) for v in views],
    )


@transactions_router.post(
    "",
    response_model=TransactionSchema,
    status_code=201,
    summary="Record Transaction",
    description="""
    Save a transaction to the store.

    Once the store confirms the insert, the stored record is added to the
    top of the dashboard's transaction list.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid transaction"},
        409: {"model": ErrorResponseSchema, "description": "Transactions still loading"},
    },
)
async def create_transaction(
    request: TransactionCreateSchema,
    dashboard_service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> TransactionSchema:
    dto = TransactionRequest(
        type=request.type,
        category=request.category,
        amount=request.amount,
        date=request.date,
        description=request.description,
    )

    view = await dashboard_service.add_transaction(dto)

    return TransactionSchema.model_validate(view)
