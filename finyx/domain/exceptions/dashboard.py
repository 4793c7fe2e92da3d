"""Dashboard session exceptions."""

from .base import DomainException


class DashboardBusyException(DomainException):
    """Raised when a mutation is attempted while transactions are loading."""

    def __init__(self):
        super().__init__(
            message="Transactions are still loading. Try again in a moment.",
            code="DASHBOARD_BUSY",
        )
