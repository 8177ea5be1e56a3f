"""Gateways for the material catalog and the dashboard aggregates."""

from datetime import date
from typing import Any

from construction_portal.application.interfaces import DashboardGateway, MaterialCatalogGateway
from construction_portal.domain.entities import CatalogMaterial, DashboardStats
from construction_portal.infrastructure.api import mappers
from construction_portal.infrastructure.api.crud_gateway import HttpCrudGateway
from construction_portal.infrastructure.api.upstream_client import UpstreamApiClient


class HttpMaterialCatalogGateway(HttpCrudGateway[CatalogMaterial], MaterialCatalogGateway):
    path = "/materials"
    list_keys = ("materials",)
    item_keys = ("material",)
    mapper = staticmethod(mappers.to_catalog_material)


class HttpDashboardGateway(DashboardGateway):
    def __init__(self, client: UpstreamApiClient):
        self._client = client

    async def stats(self) -> DashboardStats:
        body = await self._client.get("/dashboard/stats")
        stats = mappers.unwrap(body, "stats")
        return mappers.to_dashboard_stats(stats if isinstance(stats, dict) else {})

    async def finance_overview(
        self, start_date: date | None = None, end_date: date | None = None
    ) -> dict[str, Any]:
        params = {
            "startDate": start_date.isoformat() if start_date else None,
            "endDate": end_date.isoformat() if end_date else None,
        }
        body = await self._client.get("/finance/overview", params=params)
        overview = mappers.unwrap(body, "overview")
        return overview if isinstance(overview, dict) else {}

    async def finance_trends(self, months: int) -> dict[str, Any]:
        body = await self._client.get("/finance/trends", params={"months": months})
        trends = mappers.unwrap(body, "trends")
        return trends if isinstance(trends, dict) else {}

    async def project_profitability(self) -> list[dict[str, Any]]:
        body = await self._client.get("/finance/project-profitability")
        rows = mappers.unwrap(body, "projectProfitability")
        return [row for row in rows if isinstance(row, dict)] if isinstance(rows, list) else []
