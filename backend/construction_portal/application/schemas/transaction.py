"""Pydantic DTOs for project transactions and general expenses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from construction_portal.application.schemas.common import ApiPayload
from construction_portal.domain.entities import TransactionCategory, TransactionType

PaymentMethod = Literal["Cash", "Bank Transfer", "Check", "Credit Card", "Other"]
ExpenseSection = Literal["Construction Site", "Employee", "Supplier"]


class TransactionCreate(ApiPayload):
    project_id: str = Field(..., min_length=1)
    type: TransactionType
    category: TransactionCategory
    description: str = Field(..., min_length=1, max_length=500)
    amount: float = Field(..., gt=0)
    date: datetime
    payment_method: PaymentMethod = "Cash"
    notes: str = Field("", max_length=1000)


class TransactionUpdate(ApiPayload):
    type: TransactionType | None = None
    category: TransactionCategory | None = None
    description: str | None = Field(None, min_length=1, max_length=500)
    amount: float | None = Field(None, gt=0)
    date: datetime | None = None
    payment_method: PaymentMethod | None = None
    notes: str | None = Field(None, max_length=1000)


class TransactionResponse(BaseModel):
    id: str | None
    project_id: str
    type: TransactionType
    category: str
    description: str
    amount: float
    date: datetime | None
    payment_method: str
    notes: str
    payment_slip_url: str | None

    model_config = {"from_attributes": True}


class TransactionTotalsResponse(BaseModel):
    total_income: float
    total_expense: float
    balance: float
    income_count: int
    expense_count: int

    model_config = {"from_attributes": True}


class TransactionPageResponse(BaseModel):
    """Upstream-paged transactions of a project with totals over the whole filter."""

    transactions: list[TransactionResponse]
    summary: TransactionTotalsResponse
    page: int
    pages: int
    total: int

    model_config = {"from_attributes": True}


class ExpenseCreate(ApiPayload):
    section: ExpenseSection
    description: str = Field(..., min_length=1, max_length=500)
    type: TransactionType = TransactionType.EXPENSE
    amount: float = Field(..., gt=0)
    date: datetime
    payment_slip: str = ""


class ExpenseUpdate(ApiPayload):
    section: ExpenseSection | None = None
    description: str | None = Field(None, min_length=1, max_length=500)
    type: TransactionType | None = None
    amount: float | None = Field(None, gt=0)
    date: datetime | None = None
    payment_slip: str | None = None


class ExpenseResponse(BaseModel):
    id: str | None
    section: str
    description: str
    type: TransactionType
    amount: float
    date: datetime | None
    payment_slip: str

    model_config = {"from_attributes": True}
