"""Application service for the labour register."""

import logging

from construction_portal.application.interfaces import LabourerGateway
from construction_portal.application.schemas.labourer import LabourerCreate
from construction_portal.application.services.crud_service import CrudService
from construction_portal.domain.entities import Labourer, LabourSalary
from construction_portal.domain.exceptions import UpstreamApiError

logger = logging.getLogger(__name__)


class LabourerService(CrudService[Labourer]):
    entity_name = "Labourer"
    search_fields = ("name", "labour_code", "contact")
    sortable_fields = ("name", "labour_code", "base_salary", "skill_level", "status", "created_at")

    def __init__(self, gateway: LabourerGateway):
        super().__init__(gateway)
        self._labourers = gateway

    async def create(self, data: LabourerCreate) -> Labourer | None:
        """Register a labourer.

        A duplicate-key answer means an earlier, seemingly failed submit was
        stored after all; the record shows up on the next refetch, so it is
        not an error.
        """
        try:
            return await super().create(data)
        except UpstreamApiError as e:
            if not e.is_duplicate_key:
                raise
            logger.warning("Labourer %r already registered upstream", data.name)
            return None

    async def salaries(self, labourer_id: str) -> list[LabourSalary]:
        await self.get(labourer_id)
        return await self._labourers.list_salaries(labourer_id)
