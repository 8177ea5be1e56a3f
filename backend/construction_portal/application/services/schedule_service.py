"""Application service for a site's work plan and customer instalments."""

import logging
from dataclasses import dataclass

from construction_portal.application.interfaces import ScheduleGateway
from construction_portal.application.schemas.schedule import (
    PaymentPlanRequest,
    PaymentScheduleCreate,
    PaymentScheduleUpdate,
    WorkPlanRequest,
    WorkScheduleCreate,
    WorkScheduleUpdate,
)
from construction_portal.domain.entities import (
    PaymentSchedule,
    PaymentStatus,
    ScheduleSection,
    WorkSchedule,
    WorkStatus,
)
from construction_portal.domain.exceptions import EntityNotFoundError
from construction_portal.domain.financials import TaskProgress, compute_task_progress

logger = logging.getLogger(__name__)


@dataclass
class WorkStatusChange:
    schedule: WorkSchedule
    task_progress: TaskProgress


class ScheduleService:
    """Create, edit and tick off schedule steps.

    Completing a work step is what moves a site's task progress, so status
    changes answer with the recomputed progress.
    """

    def __init__(self, gateway: ScheduleGateway):
        self._gateway = gateway

    # ── Work schedules ──────────────────────────────────────────────

    async def work_schedules(
        self,
        project_id: str,
        *,
        section: ScheduleSection | None = None,
        status: WorkStatus | None = None,
    ) -> list[WorkSchedule]:
        filters = {}
        if section is not None:
            filters["section"] = section.value
        if status is not None:
            filters["status"] = status.value
        return await self._gateway.work_schedules(project_id, filters)

    async def create_work_schedule(self, data: WorkScheduleCreate) -> WorkSchedule:
        return await self._gateway.create_work_schedule(data.to_api())

    async def create_work_plan(self, data: WorkPlanRequest) -> list[WorkSchedule]:
        """Create every complete step of every section, numbered within its section."""
        created: list[WorkSchedule] = []
        for section, steps in data.sections.items():
            for order, step in enumerate(steps):
                if not step.is_complete:
                    logger.warning("Skipping incomplete %s step %r", section.value, step.step)
                    continue
                payload = {
                    **step.to_api(),
                    "project": data.project_id,
                    "section": section.value,
                    "order": order,
                }
                created.append(await self._gateway.create_work_schedule(payload))
        logger.info("Created %d work schedule steps for project %s", len(created), data.project_id)
        return created

    async def update_work_schedule(
        self, schedule_id: str, data: WorkScheduleUpdate
    ) -> WorkSchedule:
        schedule = await self._gateway.update_work_schedule(schedule_id, data.changed_fields())
        if schedule is None:
            raise EntityNotFoundError("Work schedule", schedule_id)
        return schedule

    async def update_work_status(self, schedule_id: str, status: WorkStatus) -> WorkStatusChange:
        schedule = await self._gateway.update_work_schedule(schedule_id, {"status": status.value})
        if schedule is None:
            raise EntityNotFoundError("Work schedule", schedule_id)
        logger.info("Work schedule %s is now %s", schedule_id, status.value)
        return WorkStatusChange(
            schedule=schedule, task_progress=await self.task_progress(schedule.project_id)
        )

    async def delete_work_schedule(self, schedule_id: str) -> None:
        if not await self._gateway.delete_work_schedule(schedule_id):
            raise EntityNotFoundError("Work schedule", schedule_id)

    async def task_progress(self, project_id: str) -> TaskProgress:
        return compute_task_progress(
            await self._gateway.work_schedules(project_id),
            await self._gateway.payment_schedules(project_id),
        )

    # ── Payment schedules ───────────────────────────────────────────

    async def payment_schedules(
        self, project_id: str, *, payment_status: PaymentStatus | None = None
    ) -> list[PaymentSchedule]:
        filters = {}
        if payment_status is not None:
            filters["paymentStatus"] = payment_status.value
        return await self._gateway.payment_schedules(project_id, filters)

    async def create_payment_schedule(self, data: PaymentScheduleCreate) -> PaymentSchedule:
        return await self._gateway.create_payment_schedule(data.to_api())

    async def create_payment_plan(self, data: PaymentPlanRequest) -> list[PaymentSchedule]:
        """Attach each complete instalment to the work step sharing its ``step``.

        Instalments fall due on their end date. Rows without a matching work
        step are skipped.
        """
        by_step = {s.step: s for s in await self._gateway.work_schedules(data.project_id)}
        created: list[PaymentSchedule] = []
        for order, step in enumerate(data.steps):
            if not step.is_complete:
                logger.warning("Skipping incomplete payment step %r", step.step)
                continue
            work = by_step.get(step.step)
            if work is None:
                logger.warning("No work schedule for payment step %r", step.step)
                continue
            payload = {
                "project": data.project_id,
                "workSchedule": work.id,
                "step": step.step,
                "title": step.title,
                "timeFrame": step.time_frame,
                "startDate": step.start_date.isoformat(),
                "endDate": step.end_date.isoformat(),
                "paymentAmount": step.payment,
                "dueDate": step.end_date.isoformat(),
                "order": order,
            }
            created.append(await self._gateway.create_payment_schedule(payload))
        return created

    async def update_payment_schedule(
        self, schedule_id: str, data: PaymentScheduleUpdate
    ) -> PaymentSchedule:
        schedule = await self._gateway.update_payment_schedule(
            schedule_id, data.changed_fields()
        )
        if schedule is None:
            raise EntityNotFoundError("Payment schedule", schedule_id)
        return schedule

    async def delete_payment_schedule(self, schedule_id: str) -> None:
        if not await self._gateway.delete_payment_schedule(schedule_id):
            raise EntityNotFoundError("Payment schedule", schedule_id)
