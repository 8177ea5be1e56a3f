"""Pydantic DTOs for staff accounts."""

from datetime import datetime

from pydantic import BaseModel, Field

from construction_portal.application.schemas.auth import Role
from construction_portal.application.schemas.common import ApiPayload
from construction_portal.domain.entities import Department


class EmployeeCreate(ApiPayload):
    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=6)
    role: Role = "employee"
    department: Department = Department.CONSTRUCTION
    phone_number: str | None = Field(None, max_length=20)
    salary: float | None = Field(None, ge=0)
    hire_date: datetime | None = None


class EmployeeUpdate(ApiPayload):
    """Upstream only lets managers change role, department, salary or status."""

    first_name: str | None = Field(None, min_length=2, max_length=50)
    last_name: str | None = Field(None, min_length=2, max_length=50)
    phone_number: str | None = Field(None, max_length=20)
    role: Role | None = None
    department: Department | None = None
    salary: float | None = Field(None, ge=0)
    is_active: bool | None = None


class EmployeeResponse(BaseModel):
    id: str
    name: str
    first_name: str
    last_name: str
    email: str
    role: str
    employee_code: str | None
    department: Department
    phone_number: str | None
    salary: float | None
    is_active: bool
    hire_date: datetime | None

    model_config = {"from_attributes": True}
