"""Accounts, goals and companies API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from finyx.application.services import SectionService
from finyx.core.dependencies import (
    get_account_service,
    get_company_service,
    get_goal_service,
)
from finyx.domain.entities import (
    Account,
    Company,
    Goal,
    NewAccount,
    NewCompany,
    NewGoal,
)
from finyx.presentation.schemas import (
    AccountCreateSchema,
    AccountSchema,
    CompanyCreateSchema,
    CompanySchema,
    ErrorResponseSchema,
    GoalCreateSchema,
    GoalSchema,
)
from finyx.service.aggregation import format_currency

sections_router = APIRouter(
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid record"},
        503: {"model": ErrorResponseSchema, "description": "Store unavailable"},
    },
)


def _account_schema(account: Account) -> AccountSchema:
    return AccountSchema(
        id=account.id,
        name=account.name,
        type=account.type,
        balance=account.balance,
        formatted_balance=format_currency(account.balance),
        currency=account.currency,
        created_at=account.created_at,
        updated_at=account.updated_at,
    )


@sections_router.get("/accounts", response_model=list[AccountSchema], summary="List Accounts")
async def list_accounts(
    service: Annotated[SectionService[Account], Depends(get_account_service)],
) -> list[AccountSchema]:
    return [_account_schema(a) for a in await service.list()]


@sections_router.post(
    "/accounts",
    response_model=AccountSchema,
    status_code=201,
    summary="Create Account",
)
async def create_account(
    request: AccountCreateSchema,
    service: Annotated[SectionService[Account], Depends(get_account_service)],
) -> AccountSchema:
    account = await service.create(NewAccount(**request.model_dump()))
    return _account_schema(account)


@sections_router.get("/goals", response_model=list[GoalSchema], summary="List Goals")
async def list_goals(
    service: Annotated[SectionService[Goal], Depends(get_goal_service)],
) -> list[GoalSchema]:
    return [GoalSchema.model_validate(g) for g in await service.list()]


@sections_router.post(
    "/goals",
    response_model=GoalSchema,
    status_code=201,
    summary="Create Goal",
)
async def create_goal(
    request: GoalCreateSchema,
    service: Annotated[SectionService[Goal], Depends(get_goal_service)],
) -> GoalSchema:
    goal = await service.create(NewGoal(**request.model_dump()))
    return GoalSchema.model_validate(goal)


@sections_router.get("/companies", response_model=list[CompanySchema], summary="List Companies")
async def list_companies(
    service: Annotated[SectionService[Company], Depends(get_company_service)],
) -> list[CompanySchema]:
    return [CompanySchema.model_validate(c) for c in await service.list()]


@sections_router.post(
    "/companies",
    response_model=CompanySchema,
    status_code=201,
    summary="Create Company",
)
async def create_company(
    request: CompanyCreateSchema,
    service: Annotated[SectionService[Company], Depends(get_company_service)],
) -> CompanySchema:
    company = await service.create(NewCompany(**request.model_dump()))
    return CompanySchema.model_validate(company)
