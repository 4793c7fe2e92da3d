"""Data Transfer Objects for application layer."""

from .dashboard import (
    CategoryTotalView,
    DashboardView,
    MonthlyTotalView,
    Notice,
    ReportView,
    SummaryView,
)
from .transaction import TransactionRequest, TransactionView

__all__ = [
    "CategoryTotalView",
    "DashboardView",
    "MonthlyTotalView",
    "Notice",
    "ReportView",
    "SummaryView",
    "TransactionRequest",
    "TransactionView",
]
