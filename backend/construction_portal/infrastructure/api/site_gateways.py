"""Gateways for project data: sites, schedules, materials, money and reports."""

from datetime import date
from typing import Any

from construction_portal.application.interfaces import (
    ExpenseGateway,
    ProjectGateway,
    ReportGateway,
    ScheduleGateway,
    SiteMaterialGateway,
    TransactionGateway,
)
from construction_portal.domain.entities import (
    Expense,
    PaymentSchedule,
    Project,
    SiteMaterial,
    Transaction,
    TransactionPage,
    TransactionTotals,
    WorkSchedule,
)
from construction_portal.domain.exceptions import UpstreamApiError
from construction_portal.infrastructure.api import mappers
from construction_portal.infrastructure.api.crud_gateway import HttpCrudGateway
from construction_portal.infrastructure.api.upstream_client import UpstreamApiClient


class HttpProjectGateway(HttpCrudGateway[Project], ProjectGateway):
    path = "/projects"
    list_keys = ("projects",)
    item_keys = ("project",)
    mapper = staticmethod(mappers.to_project)


class HttpExpenseGateway(HttpCrudGateway[Expense], ExpenseGateway):
    path = "/expenses"
    list_keys = ("expenses",)
    item_keys = ("expense",)
    mapper = staticmethod(mappers.to_expense)


class HttpScheduleGateway(ScheduleGateway):
    """``/work-schedule`` and ``/payment-schedule``, both filtered by ``projectId``."""

    work_path = "/work-schedule"
    payment_path = "/payment-schedule"

    def __init__(self, client: UpstreamApiClient):
        self._client = client

    async def work_schedules(
        self, project_id: str, filters: dict[str, Any] | None = None
    ) -> list[WorkSchedule]:
        params = {**(filters or {}), "projectId": project_id}
        body = await self._client.get(self.work_path, params=params)
        return mappers.map_list(body, mappers.to_work_schedule, "workSchedules")

    async def payment_schedules(
        self, project_id: str, filters: dict[str, Any] | None = None
    ) -> list[PaymentSchedule]:
        params = {**(filters or {}), "projectId": project_id}
        body = await self._client.get(self.payment_path, params=params)
        return mappers.map_list(body, mappers.to_payment_schedule, "paymentSchedules")

    async def create_work_schedule(self, payload: dict[str, Any]) -> WorkSchedule:
        body = await self._client.post(self.work_path, json=payload)
        return mappers.to_work_schedule(self._item(body, "workSchedule", self.work_path))

    async def update_work_schedule(
        self, schedule_id: str, payload: dict[str, Any]
    ) -> WorkSchedule | None:
        doc = await self._put(f"{self.work_path}/{schedule_id}", payload, "workSchedule")
        return mappers.to_work_schedule(doc) if doc is not None else None

    async def delete_work_schedule(self, schedule_id: str) -> bool:
        return await self._delete(f"{self.work_path}/{schedule_id}")

    async def create_payment_schedule(self, payload: dict[str, Any]) -> PaymentSchedule:
        body = await self._client.post(self.payment_path, json=payload)
        return mappers.to_payment_schedule(
            self._item(body, "paymentSchedule", self.payment_path)
        )

    async def update_payment_schedule(
        self, schedule_id: str, payload: dict[str, Any]
    ) -> PaymentSchedule | None:
        doc = await self._put(f"{self.payment_path}/{schedule_id}", payload, "paymentSchedule")
        return mappers.to_payment_schedule(doc) if doc is not None else None

    async def delete_payment_schedule(self, schedule_id: str) -> bool:
        return await self._delete(f"{self.payment_path}/{schedule_id}")

    @staticmethod
    def _item(body: Any, key: str, path: str) -> dict[str, Any]:
        doc = body.get(key) if isinstance(body, dict) else None
        if not isinstance(doc, dict):
            raise UpstreamApiError(502, f"Unexpected response from {path}", body)
        return doc

    async def _put(self, path: str, payload: dict[str, Any], key: str) -> dict[str, Any] | None:
        try:
            body = await self._client.put(path, json=payload)
        except UpstreamApiError as e:
            if e.status_code == 404:
                return None
            raise
        return self._item(body, key, path)

    async def _delete(self, path: str) -> bool:
        try:
            await self._client.delete(path)
        except UpstreamApiError as e:
            if e.status_code == 404:
                return False
            raise
        return True


class _ProjectScopedGateway:
    """Shared create/update/delete for resources nested by project in reads."""

    path = ""

    def __init__(self, client: UpstreamApiClient):
        self._client = client

    async def _create(self, payload: dict[str, Any]) -> dict[str, Any]:
        body = await self._client.post(self.path, json=payload)
        return mappers.unwrap(body, "data")

    async def _update(self, entity_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        body = await self._client.put(f"{self.path}/{entity_id}", json=payload)
        return mappers.unwrap(body, "data")

    async def delete(self, entity_id: str) -> bool:
        try:
            await self._client.delete(f"{self.path}/{entity_id}")
        except UpstreamApiError as e:
            if e.status_code == 404:
                return False
            raise
        return True

    async def project_summary(self, project_id: str) -> dict[str, Any]:
        body = await self._client.get(f"{self.path}/project/{project_id}/summary")
        summary = mappers.unwrap(body, "data")
        return summary if isinstance(summary, dict) else {}


class HttpSiteMaterialGateway(_ProjectScopedGateway, SiteMaterialGateway):
    path = "/site-materials"

    async def list_for_project(
        self, project_id: str, filters: dict[str, Any] | None = None
    ) -> list[SiteMaterial]:
        body = await self._client.get(f"{self.path}/project/{project_id}", params=filters)
        return mappers.map_list(mappers.unwrap(body, "data"), mappers.to_site_material, "materials")

    async def create(self, payload: dict[str, Any]) -> SiteMaterial:
        return mappers.to_site_material(await self._create(payload))

    async def update(self, material_id: str, payload: dict[str, Any]) -> SiteMaterial:
        return mappers.to_site_material(await self._update(material_id, payload))


class HttpTransactionGateway(_ProjectScopedGateway, TransactionGateway):
    path = "/transactions"

    async def list_for_project(
        self, project_id: str, filters: dict[str, Any] | None = None
    ) -> TransactionPage:
        body = await self._client.get(f"{self.path}/project/{project_id}", params=filters)
        data = mappers.unwrap(body, "data")
        if not isinstance(data, dict):
            return TransactionPage()
        transactions = mappers.map_list(data, mappers.to_transaction, "transactions")
        summary = data.get("summary") or {}
        pagination = data.get("pagination") or {}
        return TransactionPage(
            transactions=transactions,
            summary=TransactionTotals(
                total_income=mappers.to_float(summary.get("totalIncome")),
                total_expense=mappers.to_float(summary.get("totalExpense")),
                balance=mappers.to_float(summary.get("balance")),
                income_count=int(mappers.to_float(summary.get("incomeCount"))),
                expense_count=int(mappers.to_float(summary.get("expenseCount"))),
            ),
            page=int(mappers.to_float(pagination.get("current"), 1)),
            pages=int(mappers.to_float(pagination.get("pages"))),
            total=int(mappers.to_float(pagination.get("total"), len(transactions))),
        )

    async def create(self, payload: dict[str, Any]) -> Transaction:
        return mappers.to_transaction(await self._create(payload))

    async def update(self, transaction_id: str, payload: dict[str, Any]) -> Transaction:
        return mappers.to_transaction(await self._update(transaction_id, payload))


class HttpReportGateway(ReportGateway):
    def __init__(self, client: UpstreamApiClient):
        self._client = client

    async def expense_report(
        self, report_types: list[str], start_date: date, end_date: date
    ) -> bytes:
        return await self._client.post_bytes(
            "/reports/expenses",
            json={
                "reportTypes": report_types,
                "startDate": start_date.isoformat(),
                "endDate": end_date.isoformat(),
            },
        )
