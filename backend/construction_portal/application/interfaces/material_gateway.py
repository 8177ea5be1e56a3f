"""Ports for the material catalog and materials delivered to sites."""

from abc import ABC, abstractmethod
from typing import Any

from construction_portal.application.interfaces.crud_gateway import CrudGateway
from construction_portal.domain.entities import CatalogMaterial, SiteMaterial


class MaterialCatalogGateway(CrudGateway[CatalogMaterial]):
    pass


class SiteMaterialGateway(ABC):
    """Site materials are always listed per project."""

    @abstractmethod
    async def list_for_project(
        self, project_id: str, filters: dict[str, Any] | None = None
    ) -> list[SiteMaterial]:
        ...

    @abstractmethod
    async def create(self, payload: dict[str, Any]) -> SiteMaterial:
        ...

    @abstractmethod
    async def update(self, material_id: str, payload: dict[str, Any]) -> SiteMaterial:
        ...

    @abstractmethod
    async def delete(self, material_id: str) -> bool:
        ...

    @abstractmethod
    async def project_summary(self, project_id: str) -> dict[str, Any]:
        """Upstream aggregate of quantities and costs per material."""
        ...
