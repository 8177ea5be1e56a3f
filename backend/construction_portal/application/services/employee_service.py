"""Application service for staff accounts."""

import logging

from construction_portal.application.interfaces import EmployeeGateway
from construction_portal.application.services.crud_service import CrudService
from construction_portal.domain.entities import Employee
from construction_portal.domain.exceptions import EntityNotFoundError, ValidationFailedError

logger = logging.getLogger(__name__)


class EmployeeService(CrudService[Employee]):
    entity_name = "Employee"
    search_fields = ("first_name", "last_name", "email", "employee_code", "phone_number")
    sortable_fields = (
        "first_name",
        "last_name",
        "email",
        "role",
        "employee_code",
        "department",
        "salary",
        "is_active",
        "hire_date",
    )

    def __init__(self, gateway: EmployeeGateway):
        super().__init__(gateway)

    async def delete(self, entity_id: str, *, requested_by: str | None = None) -> None:
        """Remove a staff account; nobody may remove their own."""
        if requested_by is not None and entity_id == requested_by:
            raise ValidationFailedError("Cannot delete your own account")
        if not await self._gateway.delete(entity_id):
            raise EntityNotFoundError(self.entity_name, entity_id)
        logger.info("Deleted employee %s (by %s)", entity_id, requested_by)
