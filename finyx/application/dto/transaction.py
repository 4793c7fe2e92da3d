"""Data transfer objects for transaction operations."""

from dataclasses import dataclass
from typing import List

from finyx.domain.entities import NewTransaction, Transaction
from finyx.service.aggregation import (
    format_date,
    format_signed_currency,
)


@dataclass(frozen=True)
class TransactionRequest:
    """Input data for recording a transaction."""

    type: str
    category: str
    amount: float
    date: str
    description: str = ""

    def to_new_transaction(self) -> NewTransaction:
        return NewTransaction(
            type=self.type,
            category=self.category,
            amount=self.amount,
            date=self.date,
            description=(self.description or "").strip(),
        )

    def validate(self) -> List[str]:
        return self.to_new_transaction().validate()


@dataclass(frozen=True)
class TransactionView:
    """A transaction with its display strings."""

    id: str
    type: str
    category: str
    category_label: str
    description: str
    display_description: str
    amount: float
    formatted_amount: str
    date: str
    formatted_date: str
    created_at: str | None

    @classmethod
    def from_entity(cls, txn: Transaction) -> "TransactionView":
        return cls(
            id=txn.id,
            type=txn.type,
            category=txn.category,
            category_label=txn.category_label,
            description=txn.description,
            display_description=txn.display_description,
            amount=txn.amount,
            formatted_amount=format_signed_currency(txn.amount, txn.is_income),
            date=txn.date,
            formatted_date=format_date(txn.date),
            created_at=txn.created_at,
        )
