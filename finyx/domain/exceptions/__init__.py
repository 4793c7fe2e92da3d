"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .dashboard import DashboardBusyException
from .records import InvalidRecordException, InvalidTransactionException
from .store import (
    StoreException,
    StoreNotConfiguredException,
    StoreTimeoutException,
)

__all__ = [
    "DomainException",
    "DashboardBusyException",
    "InvalidRecordException",
    "InvalidTransactionException",
    "StoreException",
    "StoreNotConfiguredException",
    "StoreTimeoutException",
]
