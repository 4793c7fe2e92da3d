"""Dashboard and report Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .transaction import TransactionSchema


class NoticeSchema(BaseModel):
    """User-facing notice for a failed load."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    message: str
    variant: str = "destructive"
    required_variables: list[str] = Field(default_factory=list)
    retry_path: Optional[str] = None


class SummarySchema(BaseModel):
    """Month summary cards."""

    model_config = ConfigDict(from_attributes=True)

    total_income: float = Field(..., examples=[1000.0])
    total_expense: float = Field(..., examples=[400.0])
    balance: float = Field(..., examples=[600.0])
    formatted_income: str = Field(..., examples=["R$ 1.000,00"])
    formatted_expense: str = Field(..., examples=["R$ 400,00"])
    formatted_balance: str = Field(..., examples=["R$ 600,00"])


class CategoryTotalSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    label: str
    total: float
    formatted_total: str
    share: float


class MonthlyTotalSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    month: str = Field(..., examples=["2026-10"])
    label: str = Field(..., examples=["out/26"])
    income: float
    expense: float
    balance: float


class ReportSchema(BaseModel):
    """Schema for GET /v1/reports response."""

    model_config = ConfigDict(from_attributes=True)

    month: str
    expenses_by_category: list[CategoryTotalSchema]
    monthly_trend: list[MonthlyTotalSchema]


class DashboardSchema(BaseModel):
    """Schema for GET /v1/dashboard response."""

    model_config = ConfigDict(from_attributes=True)

    state: str = Field(..., description="idle, loading, ready or error")
    notice: Optional[NoticeSchema] = None
    month: str = Field(..., examples=["2026-10"])
    month_label: str = Field(..., examples=["outubro de 2026"])
    summary: SummarySchema
    recent: list[TransactionSchema]
    report: ReportSchema
    transaction_count: int = Field(..., ge=0)

