"""Transaction entity representing a recorded income or expense."""

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Mapping

from .category import CATEGORY_LABELS, category_label

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
MAX_DESCRIPTION_LENGTH = 255


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"  # Money in
    EXPENSE = "expense"  # Money out


@dataclass(frozen=True)
class Transaction:
    """
    Immutable transaction as stored by the remote store.

    `type` and `category` keep the raw stored values so records with
    unexpected values can still be listed; the aggregation functions
    simply leave them out of the income/expense sums.

    Attributes:
        id: Identifier assigned by the store
        type: "income" or "expense"
        category: Category value (see CATEGORY_LABELS)
        amount: Non-negative magnitude, direction is carried by type
        date: Calendar date as a YYYY-MM-DD string
        description: Optional free text
        created_at: Server-assigned creation timestamp
    """

    id: str
    type: str
    category: str
    amount: float
    date: str
    description: str = ""
    created_at: str | None = None

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME.value

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE.value

    @property
    def month(self) -> str:
        """The YYYY-MM bucket this transaction belongs to."""
        return (self.date or "")[:7]

    @property
    def category_label(self) -> str:
        return category_label(self.category)

    @property
    def display_description(self) -> str:
        """Description, or the category label when it is blank."""
        if self.description and self.description.strip():
            return self.description
        return self.category_label

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Transaction":
        """Build a transaction from a store row."""
        created_at = record.get("created_at", record.get("createdAt"))
        if isinstance(created_at, datetime):
            created_at = created_at.isoformat()

        txn_date = record.get("date") or ""
        if isinstance(txn_date, date):
            txn_date = txn_date.isoformat()

        return cls(
            id=str(record.get("id", "")),
            type=str(record.get("type") or ""),
            category=str(record.get("category") or ""),
            amount=float(record.get("amount") or 0),
            date=str(txn_date),
            description=record.get("description") or "",
            created_at=created_at,
        )


@dataclass(frozen=True)
class NewTransaction:
    """A transaction submitted by the user, before the store assigns an id."""

    type: str
    category: str
    amount: float
    date: str
    description: str = ""

    def validate(self) -> List[str]:
        errors = []

        if self.type not in (TransactionType.INCOME.value, TransactionType.EXPENSE.value):
            errors.append("type must be 'income' or 'expense'")

        if self.category not in CATEGORY_LABELS:
            errors.append(f"unknown category: {self.category}")

        if not isinstance(self.amount, (int, float)) or not math.isfinite(self.amount):
            errors.append("amount must be a number")
        elif self.amount < 0:
            errors.append("amount must not be negative")

        if not is_valid_date(self.date):
            errors.append("date must be a valid YYYY-MM-DD date")

        if len(self.description or "") > MAX_DESCRIPTION_LENGTH:
            errors.append(
                f"description must be at most {MAX_DESCRIPTION_LENGTH} characters"
            )

        return errors

    def to_record(self) -> dict:
        """Columns sent to the store on insert."""
        return {
            "type": self.type,
            "category": self.category,
            "amount": self.amount,
            "description": (self.description or "").strip(),
            "date": self.date,
        }


def is_valid_date(value: str | None) -> bool:
    """Check for a real calendar date written as YYYY-MM-DD."""
    if not value or not DATE_PATTERN.match(value):
        return False
    year, month, day = (int(part) for part in value.split("-"))
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True
