"""
Aggregation Engine for the Finyx dashboard.

Pure functions that turn the transaction collection into display-ready
figures. Every result depends only on the inputs and the current date.
"""

from .breakdown import expenses_by_category, monthly_totals, trailing_months
from .formatting import (
    format_currency,
    format_date,
    format_month_label,
    format_month_short,
    format_signed_currency,
)
from .models import CategoryTotal, MonthlyTotal, MonthSummary
from .recent import recent_transactions, sort_by_date_desc
from .settings import AggregationSettings, aggregation_settings
from .summary import current_month, month_summary

__all__ = [
    # Settings
    "AggregationSettings",
    "aggregation_settings",
    # Models
    "CategoryTotal",
    "MonthlyTotal",
    "MonthSummary",
    # Summary
    "current_month",
    "month_summary",
    # Recent window
    "recent_transactions",
    "sort_by_date_desc",
    # Charts
    "expenses_by_category",
    "monthly_totals",
    "trailing_months",
    # Formatting
    "format_currency",
    "format_date",
    "format_month_label",
    "format_month_short",
    "format_signed_currency",
]
