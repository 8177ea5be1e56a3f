"""Labourer register endpoints."""

from fastapi import APIRouter, Depends, Query, status

from construction_portal.application.schemas import (
    LabourerCreate,
    LabourerResponse,
    LabourerUpdate,
    LabourSalaryResponse,
    MessageResponse,
    TablePageResponse,
    TableParams,
)
from construction_portal.application.services import LabourerService
from construction_portal.domain.entities import LabourStatus, SkillLevel
from construction_portal.infrastructure.dependencies import (
    get_labourer_service,
    get_table_params,
    require_password_confirmation,
)

router = APIRouter(prefix="/labourers", tags=["Labourers"])


@router.get("", response_model=TablePageResponse[LabourerResponse])
async def list_labourers(
    project_id: str | None = Query(None, description="Only labourers on this project"),
    skill_level: SkillLevel | None = Query(None),
    labour_status: LabourStatus | None = Query(None, alias="status"),
    params: TableParams = Depends(get_table_params),
    service: LabourerService = Depends(get_labourer_service),
) -> TablePageResponse[LabourerResponse]:
    """Search, filter, sort and page the labour register."""
    page = await service.list(
        params,
        upstream_filters={"projectId": project_id},
        filters={"skill_level": skill_level, "status": labour_status},
    )
    return TablePageResponse[LabourerResponse].model_validate(page, from_attributes=True)


@router.get("/{labourer_id}", response_model=LabourerResponse)
async def get_labourer(
    labourer_id: str,
    service: LabourerService = Depends(get_labourer_service),
) -> LabourerResponse:
    labourer = await service.get(labourer_id)
    return LabourerResponse.model_validate(labourer, from_attributes=True)


@router.get("/{labourer_id}/salaries", response_model=list[LabourSalaryResponse])
async def list_labourer_salaries(
    labourer_id: str,
    service: LabourerService = Depends(get_labourer_service),
) -> list[LabourSalaryResponse]:
    """Every wage payment made to one labourer."""
    salaries = await service.salaries(labourer_id)
    return [LabourSalaryResponse.model_validate(s, from_attributes=True) for s in salaries]


@router.post(
    "",
    response_model=LabourerResponse | MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_labourer(
    data: LabourerCreate,
    service: LabourerService = Depends(get_labourer_service),
) -> LabourerResponse | MessageResponse:
    """Register a labourer.

    A duplicate labour code reported upstream is logged and answered with a
    message rather than an error.
    """
    labourer = await service.create(data)
    if labourer is None:
        return MessageResponse(message="Labourer already registered")
    return LabourerResponse.model_validate(labourer, from_attributes=True)


@router.put(
    "/{labourer_id}",
    response_model=LabourerResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_labourer(
    labourer_id: str,
    data: LabourerUpdate,
    service: LabourerService = Depends(get_labourer_service),
) -> LabourerResponse:
    labourer = await service.update(labourer_id, data)
    return LabourerResponse.model_validate(labourer, from_attributes=True)


@router.delete(
    "/{labourer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_labourer(
    labourer_id: str,
    service: LabourerService = Depends(get_labourer_service),
) -> None:
    await service.delete(labourer_id)
