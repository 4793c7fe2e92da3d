"""
Unit Tests for the Finyx Aggregation Engine.

These tests verify:
1. Month summary sums, balance identity and month membership
2. Recent window ordering, truncation and input immutability
3. Category breakdown and monthly evolution for the charts

Test Categories:
- test_month_summary_*: Summary card tests
- test_recent_*: Recent window tests
- test_expenses_by_category_*: Pie chart tests
- test_monthly_totals_*: Bar chart tests
"""

import random
from datetime import date

import pytest

from finyx.domain.entities import Transaction
from finyx.service.aggregation import (
    current_month,
    expenses_by_category,
    month_summary,
    monthly_totals,
    recent_transactions,
    trailing_months,
)


# =============================================================================
# Test Fixtures
# =============================================================================

def make_txn(
    txn_type: str = "expense",
    amount: float = 10.0,
    txn_date: str = "2024-06-01",
    category: str = "outros",
    txn_id: str | None = None,
) -> Transaction:
    """Create a test transaction."""
    return Transaction(
        id=txn_id or f"{txn_type}-{txn_date}-{amount}",
        type=txn_type,
        category=category,
        amount=amount,
        date=txn_date,
    )


@pytest.fixture
def june_collection() -> list[Transaction]:
    """Income and expense in June plus one May expense."""
    return [
        make_txn("income", 1000, "2024-06-01", "salario"),
        make_txn("expense", 400, "2024-06-15", "moradia"),
        make_txn("expense", 50, "2024-05-20", "lazer"),
    ]


# =============================================================================
# Month Summary Tests
# =============================================================================

class TestMonthSummary:
    """Tests for month_summary."""

    def test_month_summary_excludes_other_months(self, june_collection):
        """The May expense is not part of the June summary."""
        summary = month_summary(june_collection, "2024-06")

        assert summary.total_income == 1000
        assert summary.total_expense == 400
        assert summary.balance == 600

    def test_month_summary_empty_collection(self):
        summary = month_summary([], "2024-06")

        assert summary.total_income == 0
        assert summary.total_expense == 0
        assert summary.balance == 0
        assert summary.unclassified_count == 0

    def test_month_summary_balance_identity(self):
        """balance == total_income - total_expense for random collections."""
        rng = random.Random(42)
        for _ in range(50):
            transactions = [
                make_txn(
                    rng.choice(["income", "expense"]),
                    round(rng.uniform(0, 5000), 2),
                    f"2024-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}",
                    txn_id=str(i),
                )
                for i in range(rng.randint(0, 30))
            ]
            summary = month_summary(transactions, "2024-06")

            assert summary.balance == summary.total_income - summary.total_expense
            assert summary.total_income >= 0
            assert summary.total_expense >= 0

    def test_month_summary_matches_per_type_sums(self):
        transactions = [
            make_txn("income", 0.1, "2024-06-01"),
            make_txn("income", 0.2, "2024-06-02"),
            make_txn("expense", 0.3, "2024-06-03"),
            make_txn("income", 99, "2024-07-01"),
        ]

        summary = month_summary(transactions, "2024-06")

        assert summary.total_income == pytest.approx(0.3)
        assert summary.total_expense == pytest.approx(0.3)

    def test_month_summary_independent_of_order(self):
        transactions = [
            make_txn("expense", amount, "2024-06-10", txn_id=str(i))
            for i, amount in enumerate([0.1, 1e16, 0.7, 3.3, 1e-3])
        ]
        reversed_summary = month_summary(list(reversed(transactions)), "2024-06")

        assert month_summary(transactions, "2024-06") == reversed_summary

    def test_month_summary_cross_year_prefix(self):
        """December of one year never mixes with December of another."""
        transactions = [
            make_txn("income", 100, "2023-12-31"),
            make_txn("income", 200, "2024-12-01"),
            make_txn("expense", 30, "2024-12-31"),
        ]

        dec_2023 = month_summary(transactions, "2023-12")
        dec_2024 = month_summary(transactions, "2024-12")

        assert dec_2023.total_income == 100
        assert dec_2023.total_expense == 0
        assert dec_2024.total_income == 200
        assert dec_2024.total_expense == 30

    def test_month_summary_unknown_type_excluded_and_counted(self):
        transactions = [
            make_txn("income", 100, "2024-06-01"),
            make_txn("transfer", 500, "2024-06-02"),
            make_txn("", 10, "2024-06-03"),
            make_txn("transfer", 500, "2024-05-02"),
        ]

        summary = month_summary(transactions, "2024-06")

        assert summary.total_income == 100
        assert summary.total_expense == 0
        assert summary.unclassified_count == 2

    def test_month_summary_missing_date_does_not_match(self):
        transactions = [make_txn("income", 100, "")]

        summary = month_summary(transactions, "2024-06")

        assert summary.total_income == 0

    def test_current_month_from_date(self):
        assert current_month(date(2026, 1, 31)) == "2026-01"
        assert current_month(date(2026, 10, 17)) == "2026-10"


# =============================================================================
# Recent Window Tests
# =============================================================================

class TestRecentTransactions:
    """Tests for recent_transactions."""

    def test_recent_at_most_limit_newest_first(self):
        transactions = [
            make_txn(txn_date=f"2024-06-{day:02d}", txn_id=str(day))
            for day in (3, 12, 1, 25, 7, 18, 9)
        ]

        recent = recent_transactions(transactions, 5)

        assert [t.date for t in recent] == [
            "2024-06-25",
            "2024-06-18",
            "2024-06-12",
            "2024-06-09",
            "2024-06-07",
        ]

    def test_recent_does_not_modify_input(self):
        transactions = [
            make_txn(txn_date="2024-01-01", txn_id="a"),
            make_txn(txn_date="2024-03-01", txn_id="b"),
            make_txn(txn_date="2024-02-01", txn_id="c"),
        ]
        snapshot = list(transactions)

        recent_transactions(transactions, 2)

        assert transactions == snapshot

    def test_recent_is_subsequence_of_input(self):
        rng = random.Random(7)
        transactions = [
            make_txn(txn_date=f"2024-{rng.randint(1, 12):02d}-01", txn_id=str(i))
            for i in range(20)
        ]

        recent = recent_transactions(transactions, 5)

        assert len(recent) == 5
        assert all(t in transactions for t in recent)
        dates = [t.date for t in recent]
        assert dates == sorted(dates, reverse=True)

    def test_recent_ties_keep_input_order(self):
        transactions = [
            make_txn(txn_date="2024-06-01", txn_id="first"),
            make_txn(txn_date="2024-06-01", txn_id="second"),
            make_txn(txn_date="2024-06-01", txn_id="third"),
        ]

        recent = recent_transactions(transactions, 5)

        assert [t.id for t in recent] == ["first", "second", "third"]

    def test_recent_empty_collection(self):
        assert recent_transactions([], 5) == []

    def test_recent_shorter_than_limit(self):
        transactions = [make_txn(txn_date="2024-06-01")]

        assert len(recent_transactions(transactions, 5)) == 1

    @pytest.mark.parametrize("limit", [0, -1])
    def test_recent_non_positive_limit(self, limit):
        transactions = [make_txn(txn_date="2024-06-01")]

        assert recent_transactions(transactions, limit) == []

    def test_recent_accepts_tuple(self):
        transactions = (
            make_txn(txn_date="2024-06-01", txn_id="old"),
            make_txn(txn_date="2024-06-02", txn_id="new"),
        )

        assert [t.id for t in recent_transactions(transactions)] == ["new", "old"]


# =============================================================================
# Chart Aggregate Tests
# =============================================================================

class TestExpensesByCategory:
    """Tests for expenses_by_category."""

    def test_expenses_by_category_sorted_with_shares(self):
        transactions = [
            make_txn("expense", 300, "2024-06-01", "moradia"),
            make_txn("expense", 50, "2024-06-02", "alimentacao"),
            make_txn("expense", 50, "2024-06-03", "alimentacao"),
            make_txn("income", 1000, "2024-06-05", "salario"),
        ]

        totals = expenses_by_category(transactions, "2024-06")

        assert [t.category for t in totals] == ["moradia", "alimentacao"]
        assert totals[0].label == "Moradia"
        assert totals[1].label == "Alimentação"
        assert totals[1].total == 100
        assert totals[0].share == pytest.approx(0.75)
        assert sum(t.share for t in totals) == pytest.approx(1.0)

    def test_expenses_by_category_filters_month(self, june_collection):
        totals = expenses_by_category(june_collection, "2024-05")

        assert len(totals) == 1
        assert totals[0].category == "lazer"
        assert totals[0].total == 50

    def test_expenses_by_category_all_months(self, june_collection):
        totals = expenses_by_category(june_collection)

        assert {t.category for t in totals} == {"moradia", "lazer"}

    def test_expenses_by_category_zero_total_share(self):
        transactions = [make_txn("expense", 0, "2024-06-01", "contas")]

        totals = expenses_by_category(transactions, "2024-06")

        assert totals[0].share == 0.0

    def test_expenses_by_category_unknown_category_label(self):
        transactions = [make_txn("expense", 10, "2024-06-01", "pets")]

        totals = expenses_by_category(transactions, "2024-06")

        assert totals[0].label == "pets"


class TestMonthlyTotals:
    """Tests for monthly_totals."""

    def test_trailing_months_crosses_year(self):
        assert trailing_months("2024-02", 4) == [
            "2023-11",
            "2023-12",
            "2024-01",
            "2024-02",
        ]

    def test_monthly_totals_keeps_empty_months(self, june_collection):
        totals = monthly_totals(june_collection, months=3, reference_month="2024-06")

        assert [m.month for m in totals] == ["2024-04", "2024-05", "2024-06"]
        assert [m.label for m in totals] == ["abr/24", "mai/24", "jun/24"]
        assert totals[0].income == 0 and totals[0].expense == 0
        assert totals[1].expense == 50
        assert totals[2].income == 1000
        assert totals[2].balance == 600

    def test_monthly_totals_ignores_outside_window(self):
        transactions = [
            make_txn("income", 10, "2023-06-01"),
            make_txn("income", 20, "2024-07-01"),
        ]

        totals = monthly_totals(transactions, months=6, reference_month="2024-06")

        assert len(totals) == 6
        assert all(m.income == 0 for m in totals)
