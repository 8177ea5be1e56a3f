"""Application services for the material catalog and dashboard figures."""

import logging
from datetime import date
from typing import Any

from construction_portal.application.interfaces import DashboardGateway, MaterialCatalogGateway
from construction_portal.application.services.crud_service import CrudService
from construction_portal.domain.entities import CatalogMaterial, DashboardStats
from construction_portal.domain.exceptions import ValidationFailedError

logger = logging.getLogger(__name__)


class MaterialCatalogService(CrudService[CatalogMaterial]):
    entity_name = "Material"
    search_fields = ("material", "supplier", "description")
    sortable_fields = (
        "material",
        "supplier",
        "amount",
        "amount_type",
        "received_date",
        "updated_on",
    )

    def __init__(self, gateway: MaterialCatalogGateway):
        super().__init__(gateway)

    async def update_stock(self, material_id: str, quantity: float) -> CatalogMaterial:
        """Set the quantity on hand for one catalog line."""
        material = await self._gateway.update(material_id, {"quantity": quantity})
        logger.info("Stock of material %s set to %s", material_id, quantity)
        return material


class DashboardService:
    def __init__(self, gateway: DashboardGateway):
        self._gateway = gateway

    async def stats(self) -> DashboardStats:
        return await self._gateway.stats()

    async def finance_overview(
        self, start_date: date | None = None, end_date: date | None = None
    ) -> dict[str, Any]:
        if start_date and end_date and end_date < start_date:
            raise ValidationFailedError("End date must be after start date")
        return await self._gateway.finance_overview(start_date, end_date)

    async def finance_trends(self, months: int = 12) -> dict[str, Any]:
        return await self._gateway.finance_trends(months)

    async def project_profitability(self) -> list[dict[str, Any]]:
        return await self._gateway.project_profitability()
