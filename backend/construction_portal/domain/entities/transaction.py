"""Domain entities for money movements — project transactions and general expenses."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class TransactionCategory(str, Enum):
    """Buckets used by the site financial summary."""

    MATERIALS = "Materials"
    LABOR = "Labor"
    EQUIPMENT = "Equipment"
    TRANSPORTATION = "Transportation"
    PERMITS = "Permits"
    UTILITIES = "Utilities"
    SUBCONTRACTOR = "Subcontractor"
    CLIENT_PAYMENT = "Client Payment"
    ADVANCE_PAYMENT = "Advance Payment"
    OTHER = "Other"


@dataclass
class Transaction:
    """An income or expense entry tied to a project."""

    project_id: str
    type: TransactionType
    category: str
    description: str
    amount: float
    date: datetime | None = None
    id: str | None = None
    payment_method: str = "Cash"
    notes: str = ""
    payment_slip_url: str | None = None


@dataclass
class TransactionTotals:
    total_income: float = 0.0
    total_expense: float = 0.0
    balance: float = 0.0
    income_count: int = 0
    expense_count: int = 0


@dataclass
class TransactionPage:
    """One upstream page of a project's transactions plus whole-filter totals."""

    transactions: list[Transaction] = field(default_factory=list)
    summary: TransactionTotals = field(default_factory=TransactionTotals)
    page: int = 1
    pages: int = 0
    total: int = 0


@dataclass
class Expense:
    """A general ledger entry from the finance section (not project bound)."""

    section: str
    description: str
    type: TransactionType
    amount: float
    date: datetime | None = None
    id: str | None = None
    payment_slip: str = ""
