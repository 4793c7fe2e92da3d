"""Dashboard service - builds display-ready views from the session."""

from datetime import date
from typing import List

import structlog

from finyx.application.dto import (
    CategoryTotalView,
    DashboardView,
    MonthlyTotalView,
    ReportView,
    SummaryView,
    TransactionRequest,
    TransactionView,
)
from finyx.domain.entities import Transaction
from finyx.domain.exceptions import InvalidTransactionException
from finyx.service.aggregation import (
    AggregationSettings,
    aggregation_settings,
    current_month,
    expenses_by_category,
    format_month_label,
    month_summary,
    monthly_totals,
    recent_transactions,
    sort_by_date_desc,
)

from .dashboard_session import DashboardSession

logger = structlog.get_logger(__name__)


class DashboardService:
    """
    Application service for the dashboard, transactions and reports
    sections.

    Aggregates are recomputed from the session's collection on every
    call; nothing is cached.
    """

    def __init__(
        self,
        session: DashboardSession,
        settings: AggregationSettings = aggregation_settings,
    ):
        self._session = session
        self._settings = settings

    async def get_dashboard(
        self,
        month: str | None = None,
        today: date | None = None,
    ) -> DashboardView:
        """
        Build the dashboard for a reference month.

        Args:
            month: YYYY-MM key, defaults to the current local month
            today: Date used to derive the current month

        Returns:
            DashboardView with state, notice, summary, recent window
            and chart data
        """
        await self._session.ensure_loaded()
        return self._build_dashboard(month or current_month(today))

    async def reload(
        self,
        month: str | None = None,
        today: date | None = None,
    ) -> DashboardView:
        """User-initiated reload from the store."""
        logger.info("dashboard_reload_requested")
        await self._session.load()
        return self._build_dashboard(month or current_month(today))

    async def get_report(
        self,
        month: str | None = None,
        today: date | None = None,
    ) -> ReportView:
        await self._session.ensure_loaded()
        reference_month = month or current_month(today)
        return self._build_report(self._session.transactions, reference_month)

    async def list_transactions(self) -> List[TransactionView]:
        """All loaded transactions, newest first."""
        await self._session.ensure_loaded()
        return [
            TransactionView.from_entity(txn)
            for txn in sort_by_date_desc(self._session.transactions)
        ]

    async def add_transaction(self, request: TransactionRequest) -> TransactionView:
        """
        Record a new transaction.

        Raises:
            InvalidTransactionException: If request validation fails
            DashboardBusyException: If transactions are still loading
            StoreException: If the store rejects the insert
        """
        errors = request.validate()
        if errors:
            raise InvalidTransactionException(errors)

        created = await self._session.add_transaction(request.to_new_transaction())
        return TransactionView.from_entity(created)

    def _build_dashboard(self, reference_month: str) -> DashboardView:
        transactions = self._session.transactions
        summary = month_summary(transactions, reference_month)

        if summary.unclassified_count:
            logger.warning(
                "unclassified_transactions_excluded",
                month=reference_month,
                count=summary.unclassified_count,
            )

        recent = recent_transactions(transactions, self._settings.recent_limit)

        return DashboardView(
            state=self._session.state.value,
            notice=self._session.notice,
            month=reference_month,
            month_label=format_month_label(reference_month),
            summary=SummaryView.from_summary(summary),
            recent=[TransactionView.from_entity(txn) for txn in recent],
            report=self._build_report(transactions, reference_month),
            transaction_count=len(transactions),
        )

    def _build_report(
        self,
        transactions: tuple[Transaction, ...],
        reference_month: str,
    ) -> ReportView:
        categories = expenses_by_category(transactions, reference_month)
        trend = monthly_totals(
            transactions,
            months=self._settings.trend_months,
            reference_month=reference_month,
        )
        return ReportView(
            month=reference_month,
            expenses_by_category=[CategoryTotalView.from_total(c) for c in categories],
            monthly_trend=[MonthlyTotalView.from_total(m) for m in trend],
        )
