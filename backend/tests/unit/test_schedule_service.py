"""Unit tests for ScheduleService: plans, status changes and task progress."""

from datetime import datetime, timezone

import pytest

from construction_portal.application.interfaces import ScheduleGateway
from construction_portal.application.schemas import (
    PaymentPlanRequest,
    PaymentScheduleUpdate,
    WorkPlanRequest,
    WorkScheduleUpdate,
)
from construction_portal.application.services import ScheduleService
from construction_portal.domain.entities import (
    PaymentSchedule,
    PaymentStatus,
    ScheduleSection,
    WorkSchedule,
    WorkStatus,
)
from construction_portal.domain.exceptions import EntityNotFoundError


class FakeScheduleGateway(ScheduleGateway):
    """In-memory work plan and instalments, keyed by id."""

    def __init__(self):
        self.work: dict[str, WorkSchedule] = {}
        self.payments: dict[str, PaymentSchedule] = {}
        self.created_work: list[dict] = []
        self.created_payments: list[dict] = []
        self.last_filters = None

    async def work_schedules(self, project_id, filters=None):
        self.last_filters = filters
        return [s for s in self.work.values() if s.project_id == project_id]

    async def payment_schedules(self, project_id, filters=None):
        self.last_filters = filters
        return [s for s in self.payments.values() if s.project_id == project_id]

    async def create_work_schedule(self, payload):
        self.created_work.append(payload)
        schedule = WorkSchedule(
            id=f"w{len(self.created_work)}",
            project_id=payload["project"],
            section=payload["section"],
            step=payload["step"],
            title=payload["title"],
            order=payload.get("order", 0),
        )
        self.work[schedule.id] = schedule
        return schedule

    async def update_work_schedule(self, schedule_id, payload):
        schedule = self.work.get(schedule_id)
        if schedule is None:
            return None
        if "status" in payload:
            schedule.status = WorkStatus(payload["status"])
        if "title" in payload:
            schedule.title = payload["title"]
        return schedule

    async def delete_work_schedule(self, schedule_id):
        return self.work.pop(schedule_id, None) is not None

    async def create_payment_schedule(self, payload):
        self.created_payments.append(payload)
        schedule = PaymentSchedule(
            id=f"pay{len(self.created_payments)}",
            project_id=payload["project"],
            step=payload["step"],
            payment_amount=payload["paymentAmount"],
            work_schedule_id=payload["workSchedule"],
        )
        self.payments[schedule.id] = schedule
        return schedule

    async def update_payment_schedule(self, schedule_id, payload):
        schedule = self.payments.get(schedule_id)
        if schedule is None:
            return None
        if "paymentStatus" in payload:
            schedule.payment_status = PaymentStatus(payload["paymentStatus"])
        return schedule

    async def delete_payment_schedule(self, schedule_id):
        return self.payments.pop(schedule_id, None) is not None


def _when(day: int) -> datetime:
    return datetime(2024, 3, day, tzinfo=timezone.utc)


def _step(step: str, **overrides) -> dict:
    row = dict(step=step, title=f"Step {step}", time_frame="1 week",
               start_date=_when(1), end_date=_when(7))
    row.update(overrides)
    return row


@pytest.fixture
def gateway() -> FakeScheduleGateway:
    return FakeScheduleGateway()


@pytest.fixture
def service(gateway: FakeScheduleGateway) -> ScheduleService:
    return ScheduleService(gateway)


@pytest.mark.asyncio
async def test_work_plan_numbers_steps_per_section_and_skips_incomplete(service, gateway):
    plan = WorkPlanRequest(
        project_id="p1",
        sections={
            ScheduleSection.PRE_PROJECT: [_step("1.1"), _step("1.2", time_frame=""), _step("1.3")],
            ScheduleSection.PROJECT: [_step("2.1")],
        },
    )

    created = await service.create_work_plan(plan)

    assert [s.step for s in created] == ["1.1", "1.3", "2.1"]
    assert [p["order"] for p in gateway.created_work] == [0, 2, 0]
    assert gateway.created_work[0]["section"] == "Pre-Project Process"
    assert gateway.created_work[0]["project"] == "p1"
    assert gateway.created_work[0]["timeFrame"] == "1 week"


@pytest.mark.asyncio
async def test_payment_plan_attaches_to_matching_work_step(service, gateway):
    await service.create_work_plan(
        WorkPlanRequest(project_id="p1", sections={ScheduleSection.PROJECT: [_step("2.1")]})
    )

    created = await service.create_payment_plan(
        PaymentPlanRequest(
            project_id="p1",
            steps=[_step("2.1", payment=50000), _step("9.9", payment=100), _step("2.1")],
        )
    )

    assert len(created) == 1
    payload = gateway.created_payments[0]
    assert payload["workSchedule"] == "w1"
    assert payload["dueDate"] == payload["endDate"]
    assert payload["paymentAmount"] == 50000
    assert payload["order"] == 0


@pytest.mark.asyncio
async def test_completing_a_step_reports_new_task_progress(service, gateway):
    gateway.work["w1"] = WorkSchedule(id="w1", project_id="p1", section="Project Process",
                                      step="2.1", title="Foundation")
    gateway.work["w2"] = WorkSchedule(id="w2", project_id="p1", section="Project Process",
                                      step="2.2", title="Walls")
    gateway.payments["a"] = PaymentSchedule(id="a", project_id="p1", step="2.1",
                                            payment_amount=300, work_schedule_id="w1")
    gateway.payments["b"] = PaymentSchedule(id="b", project_id="p1", step="2.2",
                                            payment_amount=100, work_schedule_id="w2")

    change = await service.update_work_status("w1", WorkStatus.COMPLETED)

    assert change.schedule.status == WorkStatus.COMPLETED
    assert change.task_progress.total_amount == 400
    assert change.task_progress.completed_amount == 300
    assert change.task_progress.percent_complete == 75.0


@pytest.mark.asyncio
async def test_status_change_on_unknown_step_raises(service):
    with pytest.raises(EntityNotFoundError):
        await service.update_work_status("missing", WorkStatus.COMPLETED)


@pytest.mark.asyncio
async def test_update_sends_only_changed_fields(service, gateway):
    gateway.work["w1"] = WorkSchedule(id="w1", project_id="p1", section="Project Process",
                                      step="2.1", title="Foundation")
    updated = await service.update_work_schedule("w1", WorkScheduleUpdate(title="Footings"))
    assert updated.title == "Footings"
    assert updated.status == WorkStatus.PENDING


@pytest.mark.asyncio
async def test_list_filters_pass_through(service, gateway):
    await service.work_schedules("p1", section=ScheduleSection.HANDOVER,
                                 status=WorkStatus.IN_PROGRESS)
    assert gateway.last_filters == {"section": "Project Handover Process",
                                    "status": "in-progress"}
    await service.payment_schedules("p1", payment_status=PaymentStatus.OVERDUE)
    assert gateway.last_filters == {"paymentStatus": "overdue"}


@pytest.mark.asyncio
async def test_payment_update_and_delete(service, gateway):
    gateway.payments["a"] = PaymentSchedule(id="a", project_id="p1", step="2.1",
                                            payment_amount=300)
    paid = await service.update_payment_schedule(
        "a", PaymentScheduleUpdate(payment_status=PaymentStatus.PAID)
    )
    assert paid.payment_status == PaymentStatus.PAID

    await service.delete_payment_schedule("a")
    with pytest.raises(EntityNotFoundError):
        await service.delete_payment_schedule("a")
    with pytest.raises(EntityNotFoundError):
        await service.delete_work_schedule("nope")
