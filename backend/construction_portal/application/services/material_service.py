"""Application service for materials delivered to sites."""

from typing import Any

from construction_portal.application.interfaces import SiteMaterialGateway
from construction_portal.application.schemas.common import TableParams
from construction_portal.application.schemas.material import (
    SiteMaterialCreate,
    SiteMaterialUpdate,
)
from construction_portal.domain.entities import SiteMaterial
from construction_portal.domain.exceptions import EntityNotFoundError
from construction_portal.domain.table_query import TablePage, apply_table_query


class MaterialService:
    search_fields = ("material", "supplier", "notes")
    sortable_fields = (
        "material",
        "supplier",
        "amount",
        "unit_cost",
        "total_cost",
        "received_date",
        "expected_date",
        "status",
    )

    def __init__(self, gateway: SiteMaterialGateway):
        self._gateway = gateway

    async def list_for_project(
        self,
        project_id: str,
        params: TableParams | None = None,
        *,
        material: str | None = None,
        status: str | None = None,
    ) -> TablePage[SiteMaterial]:
        # Upstream pages too; ask for everything and page locally.
        materials = await self._gateway.list_for_project(project_id, {"limit": 1000})
        query = (params or TableParams()).to_query(
            self.search_fields,
            {"material": material, "status": status},
            self.sortable_fields,
        )
        return apply_table_query(materials, query)

    async def create(self, data: SiteMaterialCreate) -> SiteMaterial:
        return await self._gateway.create(data.to_api())

    async def update(self, material_id: str, data: SiteMaterialUpdate) -> SiteMaterial:
        return await self._gateway.update(material_id, data.changed_fields())

    async def delete(self, material_id: str) -> None:
        if not await self._gateway.delete(material_id):
            raise EntityNotFoundError("Material", material_id)

    async def project_summary(self, project_id: str) -> dict[str, Any]:
        return await self._gateway.project_summary(project_id)
