"""
Domain Interfaces (Ports)
"""

from .store import (
    ACCOUNTS,
    COMPANIES,
    GOALS,
    ORDER_COLUMNS,
    TRANSACTIONS,
    Record,
    RemoteStore,
)

__all__ = [
    "ACCOUNTS",
    "COMPANIES",
    "GOALS",
    "ORDER_COLUMNS",
    "TRANSACTIONS",
    "Record",
    "RemoteStore",
]
