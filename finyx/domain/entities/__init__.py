"""Domain Entities - Core business objects."""

from .account import Account, AccountType, NewAccount
from .category import CATEGORY_LABELS, Category, category_label
from .company import Company, NewCompany
from .goal import Goal, GoalStatus, NewGoal
from .transaction import NewTransaction, Transaction, TransactionType, is_valid_date

__all__ = [
    "Account",
    "AccountType",
    "NewAccount",
    "CATEGORY_LABELS",
    "Category",
    "category_label",
    "Company",
    "NewCompany",
    "Goal",
    "GoalStatus",
    "NewGoal",
    "NewTransaction",
    "Transaction",
    "TransactionType",
    "is_valid_date",
]
