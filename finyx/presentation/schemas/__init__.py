"""Pydantic schemas for API request/response validation."""

from .config import EnvironmentStatusSchema
from .dashboard import (
    CategoryTotalSchema,
    DashboardSchema,
    MonthlyTotalSchema,
    NoticeSchema,
    ReportSchema,
    SummarySchema,
)
from .error import ErrorResponseSchema
from .sections import (
    AccountCreateSchema,
    AccountSchema,
    CompanyCreateSchema,
    CompanySchema,
    GoalCreateSchema,
    GoalSchema,
)
from .transaction import (
    TransactionCreateSchema,
    TransactionListSchema,
    TransactionSchema,
)

__all__ = [
    "EnvironmentStatusSchema",
    "CategoryTotalSchema",
    "DashboardSchema",
    "MonthlyTotalSchema",
    "NoticeSchema",
    "ReportSchema",
    "SummarySchema",
    "ErrorResponseSchema",
    "AccountCreateSchema",
    "AccountSchema",
    "CompanyCreateSchema",
    "CompanySchema",
    "GoalCreateSchema",
    "GoalSchema",
    "TransactionCreateSchema",
    "TransactionListSchema",
    "TransactionSchema",
]
