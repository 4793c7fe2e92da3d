"""
Month summary for the dashboard cards.

A transaction belongs to a month when its date string starts with the
YYYY-MM reference key. The comparison is a plain string prefix: no
calendar arithmetic and no timezone normalization, so the year is part
of the key and December 2023 never mixes with December 2024.
"""

import math
from datetime import date
from typing import Iterable

from finyx.domain.entities import Transaction

from .models import MonthSummary


def current_month(today: date | None = None) -> str:
    """Return the YYYY-MM key of the local current date."""
    today = today or date.today()
    return f"{today.year:04d}-{today.month:02d}"


def in_month(transaction: Transaction, reference_month: str) -> bool:
    return (transaction.date or "").startswith(reference_month)


def month_summary(
    transactions: Iterable[Transaction],
    reference_month: str,
) -> MonthSummary:
    """
    Sum income and expense for the reference month.

    Algorithm:
        1. Keep records whose date starts with reference_month
        2. Partition by type: income, expense, anything else
        3. Sum each partition with math.fsum, which does not depend
           on the order of the records

    Records with an unknown type are not validated here; they are
    excluded from both sums and only counted in unclassified_count.

    Args:
        transactions: The full transaction collection
        reference_month: YYYY-MM key

    Returns:
        MonthSummary with balance = total_income - total_expense
    """
    income = []
    expense = []
    unclassified = 0

    for txn in transactions:
        if not in_month(txn, reference_month):
            continue
        if txn.is_income:
            income.append(txn.amount)
        elif txn.is_expense:
            expense.append(txn.amount)
        else:
            unclassified += 1

    total_income = math.fsum(income)
    total_expense = math.fsum(expense)

    return MonthSummary(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
        unclassified_count=unclassified,
    )
