"""Application service for labourer wages and staff salaries."""

import logging

from construction_portal.application.interfaces import (
    EmployeeSalaryGateway,
    LabourSalaryGateway,
)
from construction_portal.application.schemas.common import TableParams
from construction_portal.application.schemas.salary import (
    LabourSalaryCreate,
    LabourSalaryUpdate,
)
from construction_portal.application.services.crud_service import CrudService
from construction_portal.domain.entities import EmployeeSalary, LabourSalary, SalaryStatus
from construction_portal.domain.exceptions import EntityNotFoundError
from construction_portal.domain.financials import PaidSalaryTotal, paid_salary_total
from construction_portal.domain.table_query import TablePage, apply_table_query

logger = logging.getLogger(__name__)


class SalaryService:
    """Labour wage payments charged to projects."""

    search_fields = ("labourer_name", "description")
    sortable_fields = ("labourer_name", "amount", "payment_date", "pay_period", "status")

    def __init__(self, gateway: LabourSalaryGateway):
        self._gateway = gateway

    async def list_salaries(
        self,
        params: TableParams | None = None,
        *,
        project_id: str | None = None,
        status: SalaryStatus | None = None,
    ) -> TablePage[LabourSalary]:
        salaries = await self._gateway.list(
            {"projectId": project_id, "status": status.value if status else None}
        )
        query = (params or TableParams()).to_query(
            self.search_fields, sortable_fields=self.sortable_fields
        )
        return apply_table_query(salaries, query)

    async def create_salary(self, data: LabourSalaryCreate) -> LabourSalary:
        salary = await self._gateway.create(data.to_api())
        logger.info("Recorded salary of %.2f for labourer %s", data.amount, data.labour)
        return salary

    async def update_salary(self, salary_id: str, data: LabourSalaryUpdate) -> LabourSalary:
        return await self._gateway.update(salary_id, data.changed_fields())

    async def update_status(self, salary_id: str, status: SalaryStatus) -> LabourSalary:
        return await self._gateway.update(salary_id, {"status": status.value})

    async def delete_salary(self, salary_id: str) -> None:
        if not await self._gateway.delete(salary_id):
            raise EntityNotFoundError("Salary payment", salary_id)

    async def paid_total_by_project(self, project_id: str) -> PaidSalaryTotal:
        paid = await self._gateway.list(
            {"projectId": project_id, "status": SalaryStatus.PAID.value}
        )
        return paid_salary_total(s for s in paid if s.is_paid)


class EmployeeSalaryService(CrudService[EmployeeSalary]):
    """Monthly salaries of office staff and supervisors."""

    entity_name = "Salary record"
    search_fields = ("employee_code", "email", "name", "position")
    sortable_fields = ("employee_code", "name", "position", "salary", "month", "year", "status")
