"""Database infrastructure."""

from .connection import DatabaseSessionManager, to_async_url
from .models import (
    MODELS_BY_ENTITY,
    AccountModel,
    Base,
    CompanyModel,
    GoalModel,
    TransactionModel,
)

__all__ = [
    "DatabaseSessionManager",
    "to_async_url",
    "MODELS_BY_ENTITY",
    "AccountModel",
    "Base",
    "CompanyModel",
    "GoalModel",
    "TransactionModel",
]
