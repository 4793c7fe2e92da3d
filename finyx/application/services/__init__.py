"""Application services (use cases)."""

from .dashboard_service import DashboardService
from .dashboard_session import DashboardSession, DashboardState
from .section_service import SectionService
from .transaction_service import TransactionService

__all__ = [
    "DashboardService",
    "DashboardSession",
    "DashboardState",
    "SectionService",
    "TransactionService",
]
