"""Gateways for the labour register, attendance and salaries."""

import logging
from typing import Any

from construction_portal.application.interfaces import (
    AttendanceGateway,
    EmployeeSalaryGateway,
    LabourerGateway,
    LabourSalaryGateway,
)
from construction_portal.domain.entities import (
    AttendanceRecord,
    EmployeeSalary,
    Labourer,
    LabourSalary,
    SiteAttendancePercentage,
)
from construction_portal.domain.exceptions import UpstreamApiError
from construction_portal.infrastructure.api import mappers
from construction_portal.infrastructure.api.crud_gateway import HttpCrudGateway
from construction_portal.infrastructure.api.upstream_client import UpstreamApiClient

logger = logging.getLogger(__name__)


class HttpLabourerGateway(HttpCrudGateway[Labourer], LabourerGateway):
    path = "/labour"
    list_keys = ("labourers",)
    item_keys = ("labourer", "labour")
    mapper = staticmethod(mappers.to_labourer)

    async def list_salaries(self, labourer_id: str) -> list[LabourSalary]:
        body = await self._client.get(f"{self.path}/{labourer_id}/salaries")
        return mappers.map_list(body, mappers.to_labour_salary, "salaries")


class HttpAttendanceGateway(HttpCrudGateway[AttendanceRecord], AttendanceGateway):
    path = "/attendance"
    list_keys = ("attendance",)
    item_keys = ("attendance",)
    mapper = staticmethod(mappers.to_attendance)

    async def bulk_upsert(self, payloads: list[dict[str, Any]]) -> list[AttendanceRecord]:
        body = await self._client.post(f"{self.path}/bulk", json=payloads)
        if isinstance(body, dict) and body.get("message"):
            logger.info("Bulk attendance: %s", body["message"])
        return self._map_many(body)

    async def site_percentages(self, month: int, year: int) -> list[SiteAttendancePercentage]:
        # Upstream counts months from 0.
        body = await self._client.get(
            f"{self.path}/stats/site-percentages",
            params={"month": month - 1, "year": year},
        )
        return mappers.map_list(body, mappers.to_site_percentage, "data")


class HttpLabourSalaryGateway(LabourSalaryGateway):
    """Labour wages live under ``/labour/salaries``."""

    def __init__(self, client: UpstreamApiClient):
        self._client = client

    async def list(self, filters: dict[str, Any] | None = None) -> list[LabourSalary]:
        body = await self._client.get("/labour/salaries/all", params=filters)
        return mappers.map_list(body, mappers.to_labour_salary, "salaries")

    async def create(self, payload: dict[str, Any]) -> LabourSalary:
        body = await self._client.post("/labour/salaries", json=payload)
        return mappers.to_labour_salary(mappers.unwrap(body, "salary"))

    async def update(self, salary_id: str, payload: dict[str, Any]) -> LabourSalary:
        body = await self._client.put(f"/labour/salaries/{salary_id}", json=payload)
        return mappers.to_labour_salary(mappers.unwrap(body, "salary"))

    async def delete(self, salary_id: str) -> bool:
        try:
            await self._client.delete(f"/labour/salaries/{salary_id}")
        except UpstreamApiError as e:
            if e.status_code == 404:
                return False
            raise
        return True


class HttpEmployeeSalaryGateway(HttpCrudGateway[EmployeeSalary], EmployeeSalaryGateway):
    path = "/salary"
    list_keys = ("salaries",)
    item_keys = ("salary",)
    mapper = staticmethod(mappers.to_employee_salary)
