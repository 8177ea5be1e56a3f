"""Application services for suppliers, customers and subcontractors."""

import logging

from construction_portal.application.interfaces import (
    CustomerGateway,
    SubcontractorGateway,
    SupplierGateway,
)
from construction_portal.application.schemas.directory import AppointmentCreate
from construction_portal.application.services.crud_service import CrudService
from construction_portal.domain.entities import Appointment, Customer, Subcontractor, Supplier

logger = logging.getLogger(__name__)


class SupplierService(CrudService[Supplier]):
    entity_name = "Supplier"
    search_fields = ("name", "company_name", "supplier_code", "email", "city")
    sortable_fields = (
        "name",
        "company_name",
        "supplier_code",
        "category",
        "city",
        "status",
        "rating",
    )

    def __init__(self, gateway: SupplierGateway):
        super().__init__(gateway)


class CustomerService(CrudService[Customer]):
    entity_name = "Customer"
    search_fields = ("name", "nic", "customer_code", "email", "phone", "company_name")
    sortable_fields = ("name", "customer_code", "company_name", "type", "city", "status")

    def __init__(self, gateway: CustomerGateway):
        super().__init__(gateway)


class SubcontractorService(CrudService[Subcontractor]):
    entity_name = "Subcontractor"
    search_fields = ("name", "nic", "email", "contract_type", "contract_id")
    sortable_fields = ("name", "nic", "contract_type", "contract_id", "status")

    def __init__(self, gateway: SubcontractorGateway):
        super().__init__(gateway)
        self._subcontractors = gateway

    async def appoint(self, subcontractor_id: str, data: AppointmentCreate) -> Appointment:
        await self.get(subcontractor_id)
        appointment = await self._subcontractors.appoint(subcontractor_id, data.to_api())
        logger.info(
            "Appointed subcontractor %s to project %s for %.2f",
            subcontractor_id,
            data.project,
            data.cost,
        )
        return appointment

    async def appointed_to(self, project_id: str) -> list[Subcontractor]:
        """Subcontractors holding at least one appointment on ``project_id``."""
        subcontractors = await self._subcontractors.list()
        return [s for s in subcontractors if s.appointment_for(project_id) is not None]
