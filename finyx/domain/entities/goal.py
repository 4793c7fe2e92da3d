"""Savings goal entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping

from .account import to_timestamp
from .transaction import is_valid_date


class GoalStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Goal:
    """A target amount to reach by a deadline."""

    id: str
    name: str
    target_amount: float
    current_amount: float
    deadline: str
    status: str = GoalStatus.ACTIVE.value
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def progress(self) -> float:
        """Fraction of the target reached, clamped to [0, 1]."""
        if self.target_amount <= 0:
            return 0.0
        return max(0.0, min(1.0, self.current_amount / self.target_amount))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Goal":
        deadline = record.get("deadline") or ""
        return cls(
            id=str(record.get("id", "")),
            name=record.get("name") or "",
            target_amount=float(record.get("target_amount") or 0),
            current_amount=float(record.get("current_amount") or 0),
            deadline=to_timestamp(deadline) or "",
            status=record.get("status") or GoalStatus.ACTIVE.value,
            created_at=to_timestamp(record.get("created_at")),
            updated_at=to_timestamp(record.get("updated_at")),
        )


@dataclass(frozen=True)
class NewGoal:
    name: str
    target_amount: float
    deadline: str
    current_amount: float = 0.0
    status: str = GoalStatus.ACTIVE.value

    def validate(self) -> List[str]:
        errors = []
        if not self.name or not self.name.strip():
            errors.append("name is required")
        if self.target_amount <= 0:
            errors.append("target_amount must be positive")
        if self.current_amount < 0:
            errors.append("current_amount must not be negative")
        if not is_valid_date(self.deadline):
            errors.append("deadline must be a valid YYYY-MM-DD date")
        if self.status not in {s.value for s in GoalStatus}:
            errors.append(f"unknown goal status: {self.status}")
        return errors

    def to_record(self) -> dict:
        return {
            "name": self.name.strip(),
            "target_amount": self.target_amount,
            "current_amount": self.current_amount,
            "deadline": self.deadline,
            "status": self.status,
        }
