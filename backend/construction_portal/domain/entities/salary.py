"""Domain entities for salary payments — labourer wages and staff salaries."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class SalaryStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"


class PayPeriod(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    PROJECT = "project"


@dataclass
class LabourSalary:
    """A wage payment to a labourer, charged to a project."""

    labourer_id: str
    project_id: str | None
    amount: float
    payment_date: datetime | None
    id: str | None = None
    pay_period: PayPeriod = PayPeriod.MONTHLY
    status: SalaryStatus = SalaryStatus.PENDING
    description: str = ""
    labourer_name: str | None = None

    @property
    def is_paid(self) -> bool:
        return self.status == SalaryStatus.PAID


@dataclass
class EmployeeSalary:
    """Monthly salary of an office employee or supervisor.

    The upstream model uses ``"paid"``/``"not"`` rather than the labour
    salary statuses, so ``status`` stays a plain string.
    """

    employee_code: str
    position: str
    email: str
    salary: float
    month: int
    year: int
    id: str | None = None
    status: str = "not"
    payment_method: str = "bank_transfer"
    name: str | None = None
