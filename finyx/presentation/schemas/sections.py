"""Schemas for the accounts, goals and companies sections."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finyx.domain.entities import is_valid_date


class AccountCreateSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Conta corrente"])
    type: Literal["checking", "savings", "investment", "credit"]
    balance: float = Field(0.0, allow_inf_nan=False)
    currency: str = Field("BRL", min_length=3, max_length=3)


class AccountSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    type: str
    balance: float
    formatted_balance: str = Field(..., examples=["R$ 2.500,00"])
    currency: str
    created_at: str | None = None
    updated_at: str | None = None


class GoalCreateSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Reserva de emergência"])
    target_amount: float = Field(..., gt=0, allow_inf_nan=False)
    current_amount: float = Field(0.0, ge=0, allow_inf_nan=False)
    deadline: str = Field(..., examples=["2027-06-30"])
    status: Literal["active", "completed", "cancelled"] = "active"

    @field_validator("deadline")
    @classmethod
    def validate_deadline(cls, v: str) -> str:
        if not is_valid_date(v):
            raise ValueError("deadline must be a valid YYYY-MM-DD date")
        return v


class GoalSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    target_amount: float
    current_amount: float
    progress: float = Field(..., ge=0, le=1)
    deadline: str
    status: str
    created_at: str | None = None
    updated_at: str | None = None


class CompanyCreateSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field("", max_length=100)
    contact: str = Field("", max_length=255)
    notes: str = ""


class CompanySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    category: str
    contact: str
    notes: str
    created_at: str | None = None
    updated_at: str | None = None
