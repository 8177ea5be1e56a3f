"""Ports for salary payments."""

from abc import ABC, abstractmethod
from typing import Any

from construction_portal.application.interfaces.crud_gateway import CrudGateway
from construction_portal.domain.entities import EmployeeSalary, LabourSalary


class LabourSalaryGateway(ABC):
    """Wage payments to labourers (``/labour/salaries``)."""

    @abstractmethod
    async def list(self, filters: dict[str, Any] | None = None) -> list[LabourSalary]:
        ...

    @abstractmethod
    async def create(self, payload: dict[str, Any]) -> LabourSalary:
        ...

    @abstractmethod
    async def update(self, salary_id: str, payload: dict[str, Any]) -> LabourSalary:
        ...

    @abstractmethod
    async def delete(self, salary_id: str) -> bool:
        ...


class EmployeeSalaryGateway(CrudGateway[EmployeeSalary]):
    """Monthly staff salaries (``/salary``)."""
