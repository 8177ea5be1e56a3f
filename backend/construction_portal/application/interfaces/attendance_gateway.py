"""Port for daily attendance records."""

from abc import abstractmethod
from typing import Any

from construction_portal.application.interfaces.crud_gateway import CrudGateway
from construction_portal.domain.entities import AttendanceRecord, SiteAttendancePercentage


class AttendanceGateway(CrudGateway[AttendanceRecord]):
    """Attendance CRUD, bulk marking and per-site statistics."""

    @abstractmethod
    async def bulk_upsert(self, payloads: list[dict[str, Any]]) -> list[AttendanceRecord]:
        """Create or overwrite one record per (labourer, date) and return what was stored."""
        ...

    @abstractmethod
    async def site_percentages(self, month: int, year: int) -> list[SiteAttendancePercentage]:
        """Attendance ratio per site for ``month`` (1-12) of ``year``."""
        ...
