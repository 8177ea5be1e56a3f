"""Ports for construction sites and their schedules."""

from abc import ABC, abstractmethod
from typing import Any

from construction_portal.application.interfaces.crud_gateway import CrudGateway
from construction_portal.domain.entities import PaymentSchedule, Project, WorkSchedule


class ProjectGateway(CrudGateway[Project]):
    pass


class ScheduleGateway(ABC):
    """The work plan and customer instalments of a project.

    Upstream has no single-item read for either kind; ids come from a list.
    """

    @abstractmethod
    async def work_schedules(
        self, project_id: str, filters: dict[str, Any] | None = None
    ) -> list[WorkSchedule]:
        ...

    @abstractmethod
    async def payment_schedules(
        self, project_id: str, filters: dict[str, Any] | None = None
    ) -> list[PaymentSchedule]:
        ...

    @abstractmethod
    async def create_work_schedule(self, payload: dict[str, Any]) -> WorkSchedule:
        ...

    @abstractmethod
    async def update_work_schedule(
        self, schedule_id: str, payload: dict[str, Any]
    ) -> WorkSchedule | None:
        """Apply ``payload``; None when upstream reports the schedule missing."""
        ...

    @abstractmethod
    async def delete_work_schedule(self, schedule_id: str) -> bool:
        ...

    @abstractmethod
    async def create_payment_schedule(self, payload: dict[str, Any]) -> PaymentSchedule:
        ...

    @abstractmethod
    async def update_payment_schedule(
        self, schedule_id: str, payload: dict[str, Any]
    ) -> PaymentSchedule | None:
        ...

    @abstractmethod
    async def delete_payment_schedule(self, schedule_id: str) -> bool:
        ...
