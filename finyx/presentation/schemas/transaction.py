"""Transaction-related Pydantic schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finyx.domain.entities import CATEGORY_LABELS, is_valid_date


class TransactionCreateSchema(BaseModel):
    """Schema for POST /v1/transactions request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "type": "expense",
                    "category": "alimentacao",
                    "amount": 42.9,
                    "description": "Mercado",
                    "date": "2026-10-05",
                }
            ]
        }
    )

    type: Literal["income", "expense"] = Field(
        ...,
        description="Direction of the transaction",
    )
    category: str = Field(
        ...,
        description="Category value",
        examples=["alimentacao"],
    )
    amount: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Amount in reais (always non-negative)",
        examples=[42.9],
    )
    description: str = Field(
        "",
        max_length=255,
        description="Optional label; the category label is shown when blank",
    )
    date: str = Field(
        ...,
        description="Calendar date (YYYY-MM-DD)",
        examples=["2026-10-05"],
    )

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: str) -> str:
        if v not in CATEGORY_LABELS:
            raise ValueError(f"unknown category: {v}")
        return v

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        if not is_valid_date(v):
            raise ValueError("date must be a valid YYYY-MM-DD date")
        return v


class TransactionSchema(BaseModel):
    """A transaction with its display strings."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    category: str
    category_label: str
    description: str
    display_description: str
    amount: float
    formatted_amount: str = Field(..., examples=["- R$ 42,90"])
    date: str
    formatted_date: str = Field(..., examples=["05 out"])
    created_at: str | None = None


class TransactionListSchema(BaseModel):
    """Schema for GET /v1/transactions response."""

    state: str
    transactions: list[TransactionSchema]
