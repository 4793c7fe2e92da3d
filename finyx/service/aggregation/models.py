"""Result types produced by the aggregation functions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MonthSummary:
    """
    Income, expense and balance for one reference month.

    Attributes:
        total_income: Sum of income amounts in the month (>= 0)
        total_expense: Sum of expense amounts in the month (>= 0)
        balance: total_income - total_expense (may be negative)
        unclassified_count: In-month records whose type is neither
            income nor expense, left out of both sums
    """

    total_income: float
    total_expense: float
    balance: float
    unclassified_count: int = 0


@dataclass(frozen=True)
class CategoryTotal:
    """Expense total for one category (pie chart slice)."""

    category: str
    label: str
    total: float
    share: float


@dataclass(frozen=True)
class MonthlyTotal:
    """Income and expense for one month (bar chart group)."""

    month: str
    label: str
    income: float
    expense: float

    @property
    def balance(self) -> float:
        return self.income - self.expense
