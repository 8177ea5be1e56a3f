"""Application services for projects and the assembled site detail view."""

import logging
from dataclasses import dataclass

from construction_portal.application.interfaces import (
    CustomerGateway,
    LabourSalaryGateway,
    ProjectGateway,
    ScheduleGateway,
    SubcontractorGateway,
    TransactionGateway,
)
from construction_portal.application.services.crud_service import CrudService
from construction_portal.domain.entities import (
    Customer,
    Project,
    SalaryStatus,
    Subcontractor,
)
from construction_portal.domain.exceptions import EntityNotFoundError
from construction_portal.domain.financials import (
    FinancialSummary,
    TaskProgress,
    appointed_subcontractor_cost,
    compute_financial_summary,
    compute_task_progress,
    paid_salary_total,
)
from construction_portal.domain.formatting import calculate_duration_in_days, format_price

logger = logging.getLogger(__name__)

# Enough to cover every transaction of a site in one upstream page.
_ALL_TRANSACTIONS_LIMIT = 10000


class ProjectService(CrudService[Project]):
    entity_name = "Project"
    search_fields = ("name", "project_code", "location", "supervisor", "document_file_no")
    sortable_fields = (
        "name",
        "project_code",
        "location",
        "supervisor",
        "status",
        "progress",
        "start_date",
        "end_date",
        "estimated_cost",
    )

    def __init__(self, gateway: ProjectGateway):
        super().__init__(gateway)


@dataclass
class SiteDetail:
    project: Project
    customer: Customer
    subcontractors: list[Subcontractor]
    financial_summary: FinancialSummary
    task_progress: TaskProgress
    duration_days: int
    estimated_cost_display: str


class SiteDetailService:
    """Assembles everything the site detail page shows for one project."""

    def __init__(
        self,
        projects: ProjectGateway,
        customers: CustomerGateway,
        subcontractors: SubcontractorGateway,
        transactions: TransactionGateway,
        salaries: LabourSalaryGateway,
        schedules: ScheduleGateway,
    ):
        self._projects = projects
        self._customers = customers
        self._subcontractors = subcontractors
        self._transactions = transactions
        self._salaries = salaries
        self._schedules = schedules

    async def get_detail(self, project_id: str) -> SiteDetail:
        project = await self._projects.get(project_id)
        if project is None:
            raise EntityNotFoundError("Project", project_id)

        customer = await self.resolve_customer(project)

        appointed = [
            s
            for s in await self._subcontractors.list()
            if s.appointment_for(project_id) is not None
        ]

        page = await self._transactions.list_for_project(
            project_id, {"limit": _ALL_TRANSACTIONS_LIMIT}
        )
        paid = await self._salaries.list(
            {"projectId": project_id, "status": SalaryStatus.PAID.value}
        )
        summary = compute_financial_summary(
            page.transactions,
            total_income=page.summary.total_income,
            paid_salary_total=paid_salary_total(s for s in paid if s.is_paid).total_paid,
            appointed_subcontractor_total=appointed_subcontractor_cost(appointed, project_id),
        )

        progress = compute_task_progress(
            await self._schedules.work_schedules(project_id),
            await self._schedules.payment_schedules(project_id),
        )

        return SiteDetail(
            project=project,
            customer=customer,
            subcontractors=appointed,
            financial_summary=summary,
            task_progress=progress,
            duration_days=calculate_duration_in_days(project.start_date, project.end_date),
            estimated_cost_display=format_price(project.estimated_cost),
        )

    async def resolve_customer(self, project: Project) -> Customer:
        """Populated customer, else a lookup by id, else a placeholder."""
        if project.customer is not None:
            return project.customer
        if project.customer_id:
            customer = await self._customers.get(project.customer_id)
            if customer is not None:
                return customer
            logger.warning(
                "Project %s references missing customer %s", project.id, project.customer_id
            )
        return Customer.placeholder()
