"""Company entity (payees, employers and service providers)."""

from dataclasses import dataclass
from typing import Any, List, Mapping

from .account import to_timestamp


@dataclass(frozen=True)
class Company:
    id: str
    name: str
    category: str = ""
    contact: str = ""
    notes: str = ""
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Company":
        return cls(
            id=str(record.get("id", "")),
            name=record.get("name") or "",
            category=record.get("category") or "",
            contact=record.get("contact") or "",
            notes=record.get("notes") or "",
            created_at=to_timestamp(record.get("created_at")),
            updated_at=to_timestamp(record.get("updated_at")),
        )


@dataclass(frozen=True)
class NewCompany:
    name: str
    category: str = ""
    contact: str = ""
    notes: str = ""

    def validate(self) -> List[str]:
        if not self.name or not self.name.strip():
            return ["name is required"]
        return []

    def to_record(self) -> dict:
        return {
            "name": self.name.strip(),
            "category": self.category,
            "contact": self.contact,
            "notes": self.notes,
        }
