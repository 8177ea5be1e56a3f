"""Ports for suppliers, customers and subcontractors."""

from abc import abstractmethod
from typing import Any

from construction_portal.application.interfaces.crud_gateway import CrudGateway
from construction_portal.domain.entities import Appointment, Customer, Subcontractor, Supplier


class SupplierGateway(CrudGateway[Supplier]):
    pass


class CustomerGateway(CrudGateway[Customer]):
    pass


class SubcontractorGateway(CrudGateway[Subcontractor]):
    """Subcontractor CRUD plus appointment to a project."""

    @abstractmethod
    async def appoint(self, subcontractor_id: str, payload: dict[str, Any]) -> Appointment:
        ...
