"""Pydantic DTOs for labourer wages and staff salaries."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from construction_portal.application.schemas.common import ApiPayload
from construction_portal.domain.entities import PayPeriod, SalaryStatus


class LabourSalaryCreate(ApiPayload):
    labour: str = Field(..., min_length=1)
    project: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    payment_date: datetime
    pay_period: PayPeriod = PayPeriod.MONTHLY
    status: SalaryStatus = SalaryStatus.PENDING
    description: str = Field("", max_length=500)


class LabourSalaryUpdate(ApiPayload):
    amount: float | None = Field(None, ge=0)
    payment_date: datetime | None = None
    pay_period: PayPeriod | None = None
    status: SalaryStatus | None = None
    description: str | None = Field(None, max_length=500)


class LabourSalaryResponse(BaseModel):
    id: str | None
    labourer_id: str
    labourer_name: str | None
    project_id: str | None
    amount: float
    pay_period: PayPeriod
    payment_date: datetime | None
    status: SalaryStatus
    description: str

    model_config = {"from_attributes": True}


class PaidSalaryTotalResponse(BaseModel):
    project_id: str
    total_paid: float
    count: int


class EmployeeSalaryCreate(ApiPayload):
    employee_code: str = Field(..., min_length=1, alias="id")
    position: Literal["supervisor", "employee"]
    email: str = Field(..., min_length=3, max_length=254)
    salary: float = Field(..., ge=0)
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=2000, le=2100)
    status: Literal["paid", "not"] = "not"
    payment_method: Literal["bank_transfer", "cash", "check"] = "bank_transfer"


class EmployeeSalaryUpdate(ApiPayload):
    salary: float | None = Field(None, ge=0)
    month: int | None = Field(None, ge=1, le=12)
    year: int | None = Field(None, ge=2000, le=2100)
    status: Literal["paid", "not"] | None = None
    payment_method: Literal["bank_transfer", "cash", "check"] | None = None


class EmployeeSalaryResponse(BaseModel):
    id: str | None
    employee_code: str
    name: str | None
    position: str
    email: str
    salary: float
    month: int
    year: int
    status: str
    payment_method: str

    model_config = {"from_attributes": True}
