"""Work plan and payment schedule endpoints for a construction site."""

from fastapi import APIRouter, Depends, Query, status

from construction_portal.application.schemas import (
    PaymentPlanRequest,
    PaymentScheduleCreate,
    PaymentScheduleResponse,
    PaymentScheduleUpdate,
    TaskProgressResponse,
    WorkPlanRequest,
    WorkScheduleCreate,
    WorkScheduleResponse,
    WorkScheduleUpdate,
    WorkStatusResponse,
    WorkStatusUpdate,
)
from construction_portal.application.services import ScheduleService
from construction_portal.domain.entities import PaymentStatus, ScheduleSection, WorkStatus
from construction_portal.infrastructure.dependencies import (
    get_schedule_service,
    require_password_confirmation,
    require_roles,
)

router = APIRouter(prefix="/schedules", tags=["Schedules"])

_planners = require_roles("supervisor", "manager")


def _work(schedules) -> list[WorkScheduleResponse]:
    return [WorkScheduleResponse.model_validate(s, from_attributes=True) for s in schedules]


def _payments(schedules) -> list[PaymentScheduleResponse]:
    return [PaymentScheduleResponse.model_validate(s, from_attributes=True) for s in schedules]


# ── Work plan ───────────────────────────────────────────────────────


@router.get("/work/project/{project_id}", response_model=list[WorkScheduleResponse])
async def list_work_schedules(
    project_id: str,
    section: ScheduleSection | None = Query(None),
    work_status: WorkStatus | None = Query(None, alias="status"),
    service: ScheduleService = Depends(get_schedule_service),
) -> list[WorkScheduleResponse]:
    """Steps in upstream order: section, then order within the section."""
    return _work(await service.work_schedules(project_id, section=section, status=work_status))


@router.get("/project/{project_id}/progress", response_model=TaskProgressResponse)
async def get_task_progress(
    project_id: str,
    service: ScheduleService = Depends(get_schedule_service),
) -> TaskProgressResponse:
    progress = await service.task_progress(project_id)
    return TaskProgressResponse.model_validate(progress, from_attributes=True)


@router.post(
    "/work",
    response_model=WorkScheduleResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(_planners)],
)
async def create_work_schedule(
    data: WorkScheduleCreate,
    service: ScheduleService = Depends(get_schedule_service),
) -> WorkScheduleResponse:
    schedule = await service.create_work_schedule(data)
    return WorkScheduleResponse.model_validate(schedule, from_attributes=True)


@router.post(
    "/work/plan",
    response_model=list[WorkScheduleResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(_planners)],
)
async def create_work_plan(
    data: WorkPlanRequest,
    service: ScheduleService = Depends(get_schedule_service),
) -> list[WorkScheduleResponse]:
    """Create a whole plan from the scheduler form, section by section."""
    return _work(await service.create_work_plan(data))


@router.patch(
    "/work/{schedule_id}/status",
    response_model=WorkStatusResponse,
    dependencies=[Depends(_planners), Depends(require_password_confirmation)],
)
async def update_work_status(
    schedule_id: str,
    data: WorkStatusUpdate,
    service: ScheduleService = Depends(get_schedule_service),
) -> WorkStatusResponse:
    change = await service.update_work_status(schedule_id, data.status)
    return WorkStatusResponse.model_validate(change, from_attributes=True)


@router.put(
    "/work/{schedule_id}",
    response_model=WorkScheduleResponse,
    dependencies=[Depends(_planners), Depends(require_password_confirmation)],
)
async def update_work_schedule(
    schedule_id: str,
    data: WorkScheduleUpdate,
    service: ScheduleService = Depends(get_schedule_service),
) -> WorkScheduleResponse:
    schedule = await service.update_work_schedule(schedule_id, data)
    return WorkScheduleResponse.model_validate(schedule, from_attributes=True)


@router.delete(
    "/work/{schedule_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(_planners), Depends(require_password_confirmation)],
)
async def delete_work_schedule(
    schedule_id: str,
    service: ScheduleService = Depends(get_schedule_service),
) -> None:
    await service.delete_work_schedule(schedule_id)


# ── Payments ────────────────────────────────────────────────────────


@router.get("/payments/project/{project_id}", response_model=list[PaymentScheduleResponse])
async def list_payment_schedules(
    project_id: str,
    payment_status: PaymentStatus | None = Query(None),
    service: ScheduleService = Depends(get_schedule_service),
) -> list[PaymentScheduleResponse]:
    return _payments(await service.payment_schedules(project_id, payment_status=payment_status))


@router.post(
    "/payments",
    response_model=PaymentScheduleResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(_planners)],
)
async def create_payment_schedule(
    data: PaymentScheduleCreate,
    service: ScheduleService = Depends(get_schedule_service),
) -> PaymentScheduleResponse:
    schedule = await service.create_payment_schedule(data)
    return PaymentScheduleResponse.model_validate(schedule, from_attributes=True)


@router.post(
    "/payments/plan",
    response_model=list[PaymentScheduleResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(_planners)],
)
async def create_payment_plan(
    data: PaymentPlanRequest,
    service: ScheduleService = Depends(get_schedule_service),
) -> list[PaymentScheduleResponse]:
    return _payments(await service.create_payment_plan(data))


@router.put(
    "/payments/{schedule_id}",
    response_model=PaymentScheduleResponse,
    dependencies=[Depends(_planners), Depends(require_password_confirmation)],
)
async def update_payment_schedule(
    schedule_id: str,
    data: PaymentScheduleUpdate,
    service: ScheduleService = Depends(get_schedule_service),
) -> PaymentScheduleResponse:
    schedule = await service.update_payment_schedule(schedule_id, data)
    return PaymentScheduleResponse.model_validate(schedule, from_attributes=True)


@router.delete(
    "/payments/{schedule_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(_planners), Depends(require_password_confirmation)],
)
async def delete_payment_schedule(
    schedule_id: str,
    service: ScheduleService = Depends(get_schedule_service),
) -> None:
    await service.delete_payment_schedule(schedule_id)
