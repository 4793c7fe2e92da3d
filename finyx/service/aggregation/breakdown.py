"""
Chart aggregates: expenses per category and the monthly evolution.
"""

import math
from collections import defaultdict
from typing import Iterable, List

from finyx.domain.entities import Transaction, category_label

from .formatting import format_month_short
from .models import CategoryTotal, MonthlyTotal
from .summary import current_month, in_month


def expenses_by_category(
    transactions: Iterable[Transaction],
    reference_month: str | None = None,
) -> List[CategoryTotal]:
    """
    Total expenses per category.

    Args:
        transactions: The full transaction collection
        reference_month: Optional YYYY-MM key; all months when omitted

    Returns:
        One entry per category with expenses, largest total first.
        `share` is the fraction of all expenses considered (0 when the
        grand total is 0). Equal totals are ordered by category value.
    """
    amounts: dict[str, list[float]] = defaultdict(list)

    for txn in transactions:
        if not txn.is_expense:
            continue
        if reference_month is not None and not in_month(txn, reference_month):
            continue
        amounts[txn.category].append(txn.amount)

    totals = {category: math.fsum(values) for category, values in amounts.items()}
    grand_total = math.fsum(totals.values())

    result = [
        CategoryTotal(
            category=category,
            label=category_label(category),
            total=total,
            share=(total / grand_total) if grand_total > 0 else 0.0,
        )
        for category, total in totals.items()
    ]
    result.sort(key=lambda c: (-c.total, c.category))
    return result


def trailing_months(reference_month: str, count: int) -> List[str]:
    """Return `count` YYYY-MM keys ending at reference_month, oldest first."""
    year, month = (int(part) for part in reference_month.split("-"))
    months = []
    for _ in range(count):
        months.append(f"{year:04d}-{month:02d}")
        month -= 1
        if month == 0:
            month = 12
            year -= 1
    return list(reversed(months))


def monthly_totals(
    transactions: Iterable[Transaction],
    months: int = 6,
    reference_month: str | None = None,
) -> List[MonthlyTotal]:
    """
    Income and expense per month over a trailing window.

    Algorithm:
        1. Build the list of `months` month keys ending at the
           reference month (current month by default)
        2. Bucket each transaction by the first 7 characters of its date
        3. Sum income and expense per bucket; empty months stay at zero

    Returns:
        One MonthlyTotal per month, oldest first
    """
    reference_month = reference_month or current_month()
    keys = trailing_months(reference_month, months)

    income: dict[str, list[float]] = {key: [] for key in keys}
    expense: dict[str, list[float]] = {key: [] for key in keys}

    for txn in transactions:
        bucket = txn.month
        if bucket not in income:
            continue
        if txn.is_income:
            income[bucket].append(txn.amount)
        elif txn.is_expense:
            expense[bucket].append(txn.amount)

    return [
        MonthlyTotal(
            month=key,
            label=format_month_short(key),
            income=math.fsum(income[key]),
            expense=math.fsum(expense[key]),
        )
        for key in keys
    ]
