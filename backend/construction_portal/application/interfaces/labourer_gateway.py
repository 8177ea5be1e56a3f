"""Port for the labour register."""

from abc import abstractmethod

from construction_portal.application.interfaces.crud_gateway import CrudGateway
from construction_portal.domain.entities import Labourer, LabourSalary


class LabourerGateway(CrudGateway[Labourer]):
    """Labourer CRUD plus the salary history of one labourer."""

    @abstractmethod
    async def list_salaries(self, labourer_id: str) -> list[LabourSalary]:
        ...
