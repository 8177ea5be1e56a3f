"""Gateways for suppliers, customers and subcontractors."""

from typing import Any

from construction_portal.application.interfaces import (
    CustomerGateway,
    SubcontractorGateway,
    SupplierGateway,
)
from construction_portal.domain.entities import Appointment, Customer, Subcontractor, Supplier
from construction_portal.infrastructure.api import mappers
from construction_portal.infrastructure.api.crud_gateway import HttpCrudGateway


class HttpSupplierGateway(HttpCrudGateway[Supplier], SupplierGateway):
    path = "/suppliers"
    list_keys = ("suppliers",)
    item_keys = ("supplier",)
    mapper = staticmethod(mappers.to_supplier)


class HttpCustomerGateway(HttpCrudGateway[Customer], CustomerGateway):
    path = "/customers"
    list_keys = ("customers",)
    item_keys = ("customer",)
    mapper = staticmethod(mappers.to_customer)


class HttpSubcontractorGateway(HttpCrudGateway[Subcontractor], SubcontractorGateway):
    path = "/subcontractors"
    list_keys = ("subcontractors",)
    item_keys = ("subcontractor",)
    mapper = staticmethod(mappers.to_subcontractor)

    async def get(self, entity_id: str) -> Subcontractor | None:
        # Upstream has no single-item route for subcontractors.
        return next((s for s in await self.list() if s.id == entity_id), None)

    async def appoint(self, subcontractor_id: str, payload: dict[str, Any]) -> Appointment:
        body = await self._client.post(f"{self.path}/{subcontractor_id}/appoint", json=payload)
        return mappers.to_appointment(mappers.unwrap(body, "appointment"))
