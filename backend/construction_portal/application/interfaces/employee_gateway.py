"""Port for staff accounts."""

from construction_portal.application.interfaces.crud_gateway import CrudGateway
from construction_portal.domain.entities import Employee


class EmployeeGateway(CrudGateway[Employee]):
    """Staff accounts; ``create`` registers a new login for the employee."""
