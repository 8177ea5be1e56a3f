"""Domain entity for portal staff accounts."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Department(str, Enum):
    CONSTRUCTION = "construction"
    FINANCE = "finance"
    ADMINISTRATION = "administration"
    PROCUREMENT = "procurement"


@dataclass
class Employee:
    """A staff member with a login; ``employee_code`` is the upstream ``EMP0001`` number."""

    id: str
    first_name: str
    last_name: str
    email: str
    role: str = "employee"
    employee_code: str | None = None
    department: Department = Department.CONSTRUCTION
    phone_number: str | None = None
    salary: float | None = None
    is_active: bool = True
    hire_date: datetime | None = None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
