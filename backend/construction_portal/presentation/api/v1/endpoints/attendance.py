"""Attendance endpoints — daily marking, monthly grid and site percentages."""

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from construction_portal.application.schemas import (
    AttendanceCreate,
    AttendanceGridResponse,
    AttendanceMarkRequest,
    AttendanceMarkResponse,
    AttendanceResponse,
    AttendanceUpdate,
    SiteAttendancePercentageResponse,
    TablePageResponse,
    TableParams,
)
from construction_portal.application.services import AttendanceService
from construction_portal.domain.entities import AttendanceStatus
from construction_portal.infrastructure.dependencies import (
    get_attendance_service,
    get_table_params,
    require_password_confirmation,
    require_roles,
)

router = APIRouter(prefix="/attendance", tags=["Attendance"])

_markers = require_roles("supervisor", "manager")


@router.get("", response_model=TablePageResponse[AttendanceResponse])
async def list_attendance(
    project_id: str | None = Query(None),
    labourer_id: str | None = Query(None),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    attendance_status: AttendanceStatus | None = Query(None, alias="status"),
    params: TableParams = Depends(get_table_params),
    service: AttendanceService = Depends(get_attendance_service),
) -> TablePageResponse[AttendanceResponse]:
    page = await service.list(
        params,
        upstream_filters={
            "projectId": project_id,
            "labourId": labourer_id,
            "startDate": start_date.isoformat() if start_date else None,
            "endDate": end_date.isoformat() if end_date else None,
            "status": attendance_status.value if attendance_status else None,
        },
    )
    return TablePageResponse[AttendanceResponse].model_validate(page, from_attributes=True)


@router.get("/grid", response_model=AttendanceGridResponse)
async def monthly_grid(
    project_id: str = Query(..., min_length=1),
    month: int = Query(..., ge=1, le=12, description="1 = January"),
    year: int = Query(..., ge=2000, le=2100),
    service: AttendanceService = Depends(get_attendance_service),
) -> AttendanceGridResponse:
    """One row per labourer on the project, one cell per day of the month."""
    grid = await service.monthly_grid(project_id, month, year)
    return AttendanceGridResponse.model_validate(grid, from_attributes=True)


@router.get("/site-percentages", response_model=list[SiteAttendancePercentageResponse])
async def site_percentages(
    month: int = Query(..., ge=1, le=12, description="1 = January"),
    year: int = Query(..., ge=2000, le=2100),
    service: AttendanceService = Depends(get_attendance_service),
) -> list[SiteAttendancePercentageResponse]:
    """Share of present labourer-days per site for the month."""
    rows = await service.site_percentages(month, year)
    return [SiteAttendancePercentageResponse.model_validate(r, from_attributes=True) for r in rows]


@router.get("/{attendance_id}", response_model=AttendanceResponse)
async def get_attendance(
    attendance_id: str,
    service: AttendanceService = Depends(get_attendance_service),
) -> AttendanceResponse:
    record = await service.get(attendance_id)
    return AttendanceResponse.model_validate(record, from_attributes=True)


@router.post("", response_model=AttendanceResponse, status_code=status.HTTP_201_CREATED)
async def create_attendance(
    data: AttendanceCreate,
    service: AttendanceService = Depends(get_attendance_service),
) -> AttendanceResponse:
    record = await service.create(data)
    return AttendanceResponse.model_validate(record, from_attributes=True)


@router.post(
    "/bulk",
    response_model=AttendanceMarkResponse,
    dependencies=[Depends(_markers)],
)
async def mark_attendance(
    data: AttendanceMarkRequest,
    service: AttendanceService = Depends(get_attendance_service),
) -> AttendanceMarkResponse:
    """Save a day's marking sheet for a site. Supervisors and managers only."""
    saved = await service.mark_bulk(data)
    return AttendanceMarkResponse(
        message="Attendance saved successfully",
        saved=len(saved),
        attendance=[AttendanceResponse.model_validate(r, from_attributes=True) for r in saved],
    )


@router.put(
    "/{attendance_id}",
    response_model=AttendanceResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_attendance(
    attendance_id: str,
    data: AttendanceUpdate,
    service: AttendanceService = Depends(get_attendance_service),
) -> AttendanceResponse:
    record = await service.update(attendance_id, data)
    return AttendanceResponse.model_validate(record, from_attributes=True)


@router.delete(
    "/{attendance_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_attendance(
    attendance_id: str,
    service: AttendanceService = Depends(get_attendance_service),
) -> None:
    await service.delete(attendance_id)
