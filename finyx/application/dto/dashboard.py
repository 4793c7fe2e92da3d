"""Data transfer objects for the dashboard and report views."""

from dataclasses import dataclass, field
from typing import List, Optional

from finyx.service.aggregation import (
    CategoryTotal,
    MonthlyTotal,
    MonthSummary,
    format_currency,
)

from .transaction import TransactionView


@dataclass(frozen=True)
class Notice:
    """A message shown to the user when something went wrong."""

    title: str
    message: str
    variant: str = "destructive"
    required_variables: List[str] = field(default_factory=list)
    retry_path: Optional[str] = None


@dataclass(frozen=True)
class SummaryView:
    """Month summary cards."""

    total_income: float
    total_expense: float
    balance: float
    formatted_income: str
    formatted_expense: str
    formatted_balance: str

    @classmethod
    def from_summary(cls, summary: MonthSummary) -> "SummaryView":
        return cls(
            total_income=summary.total_income,
            total_expense=summary.total_expense,
            balance=summary.balance,
            formatted_income=format_currency(summary.total_income),
            formatted_expense=format_currency(summary.total_expense),
            formatted_balance=format_currency(summary.balance),
        )


@dataclass(frozen=True)
class CategoryTotalView:
    category: str
    label: str
    total: float
    formatted_total: str
    share: float

    @classmethod
    def from_total(cls, total: CategoryTotal) -> "CategoryTotalView":
        return cls(
            category=total.category,
            label=total.label,
            total=total.total,
            formatted_total=format_currency(total.total),
            share=round(total.share, 4),
        )


@dataclass(frozen=True)
class MonthlyTotalView:
    month: str
    label: str
    income: float
    expense: float
    balance: float

    @classmethod
    def from_total(cls, total: MonthlyTotal) -> "MonthlyTotalView":
        return cls(
            month=total.month,
            label=total.label,
            income=total.income,
            expense=total.expense,
            balance=total.balance,
        )


@dataclass(frozen=True)
class ReportView:
    """Category breakdown and monthly evolution."""

    month: str
    expenses_by_category: List[CategoryTotalView]
    monthly_trend: List[MonthlyTotalView]


@dataclass(frozen=True)
class DashboardView:
    """Everything the dashboard section renders."""

    state: str
    notice: Optional[Notice]
    month: str
    month_label: str
    summary: SummaryView
    recent: List[TransactionView]
    report: ReportView
    transaction_count: int
