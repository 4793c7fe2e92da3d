"""Account entity representing a bank or investment account."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping


class AccountType(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    INVESTMENT = "investment"
    CREDIT = "credit"


@dataclass(frozen=True)
class Account:
    """A named account with its current balance."""

    id: str
    name: str
    type: str
    balance: float
    currency: str = "BRL"
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Account":
        return cls(
            id=str(record.get("id", "")),
            name=record.get("name") or "",
            type=record.get("type") or "",
            balance=float(record.get("balance") or 0),
            currency=record.get("currency") or "BRL",
            created_at=to_timestamp(record.get("created_at")),
            updated_at=to_timestamp(record.get("updated_at")),
        )


@dataclass(frozen=True)
class NewAccount:
    name: str
    type: str
    balance: float = 0.0
    currency: str = "BRL"

    def validate(self) -> List[str]:
        errors = []
        if not self.name or not self.name.strip():
            errors.append("name is required")
        if self.type not in {t.value for t in AccountType}:
            errors.append(f"unknown account type: {self.type}")
        if len(self.currency or "") != 3:
            errors.append("currency must be a 3-letter code")
        return errors

    def to_record(self) -> dict:
        return {
            "name": self.name.strip(),
            "type": self.type,
            "balance": self.balance,
            "currency": self.currency.upper(),
        }


def to_timestamp(value: Any) -> str | None:
    if value is None:
        return None
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)
