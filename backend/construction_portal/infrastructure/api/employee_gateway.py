"""Gateway for staff accounts under ``/users``."""

from typing import Any

from construction_portal.application.interfaces import EmployeeGateway
from construction_portal.domain.entities import Employee
from construction_portal.infrastructure.api import mappers
from construction_portal.infrastructure.api.crud_gateway import HttpCrudGateway

# Largest page the users endpoint serves.
_PAGE_LIMIT = 100


class HttpEmployeeGateway(HttpCrudGateway[Employee], EmployeeGateway):
    path = "/users"
    list_keys = ("users",)
    item_keys = ("user",)
    mapper = staticmethod(mappers.to_employee)

    async def list(self, filters: dict[str, Any] | None = None) -> list[Employee]:
        """Every page of ``/users``; the table view pages locally."""
        employees: list[Employee] = []
        page = 1
        while True:
            params = {**(filters or {}), "page": page, "limit": _PAGE_LIMIT}
            body = await self._client.get(self.path, params=params)
            batch = self._map_many(body)
            employees.extend(batch)
            pagination = body.get("pagination") if isinstance(body, dict) else None
            if not batch or not isinstance(pagination, dict) or not pagination.get("hasNext"):
                return employees
            page += 1

    async def create(self, payload: dict[str, Any]) -> Employee | None:
        # New staff sign up through registration; the returned token is not kept.
        body = await self._client.post("/auth/register", json=payload)
        return self._map_one(body)
