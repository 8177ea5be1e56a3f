"""Subcontractor endpoints, including appointment to a construction site."""

from fastapi import APIRouter, Depends, Query, status

from construction_portal.application.schemas import (
    AppointmentCreate,
    AppointmentResponse,
    SubcontractorCreate,
    SubcontractorResponse,
    SubcontractorUpdate,
    TablePageResponse,
    TableParams,
)
from construction_portal.application.services import SubcontractorService
from construction_portal.infrastructure.dependencies import (
    get_subcontractor_service,
    get_table_params,
    require_password_confirmation,
    require_roles,
)

router = APIRouter(prefix="/subcontractors", tags=["Subcontractors"])


@router.get("", response_model=TablePageResponse[SubcontractorResponse])
async def list_subcontractors(
    contract_type: str | None = Query(None, description="e.g. Electrical, Plumbing"),
    params: TableParams = Depends(get_table_params),
    service: SubcontractorService = Depends(get_subcontractor_service),
) -> TablePageResponse[SubcontractorResponse]:
    page = await service.list(params, filters={"contract_type": contract_type})
    return TablePageResponse[SubcontractorResponse].model_validate(page, from_attributes=True)


@router.get("/appointed", response_model=list[SubcontractorResponse])
async def list_appointed(
    project_id: str = Query(..., min_length=1),
    service: SubcontractorService = Depends(get_subcontractor_service),
) -> list[SubcontractorResponse]:
    """Subcontractors holding an appointment on the given project."""
    subcontractors = await service.appointed_to(project_id)
    return [SubcontractorResponse.model_validate(s, from_attributes=True) for s in subcontractors]


@router.get("/{subcontractor_id}", response_model=SubcontractorResponse)
async def get_subcontractor(
    subcontractor_id: str,
    service: SubcontractorService = Depends(get_subcontractor_service),
) -> SubcontractorResponse:
    subcontractor = await service.get(subcontractor_id)
    return SubcontractorResponse.model_validate(subcontractor, from_attributes=True)


@router.post("", response_model=SubcontractorResponse, status_code=status.HTTP_201_CREATED)
async def create_subcontractor(
    data: SubcontractorCreate,
    service: SubcontractorService = Depends(get_subcontractor_service),
) -> SubcontractorResponse:
    subcontractor = await service.create(data)
    return SubcontractorResponse.model_validate(subcontractor, from_attributes=True)


@router.post(
    "/{subcontractor_id}/appoint",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_roles("supervisor", "manager"))],
)
async def appoint_subcontractor(
    subcontractor_id: str,
    data: AppointmentCreate,
    service: SubcontractorService = Depends(get_subcontractor_service),
) -> AppointmentResponse:
    """Appoint a subcontractor to a site. Supervisors and managers only."""
    appointment = await service.appoint(subcontractor_id, data)
    return AppointmentResponse.model_validate(appointment, from_attributes=True)


@router.put(
    "/{subcontractor_id}",
    response_model=SubcontractorResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_subcontractor(
    subcontractor_id: str,
    data: SubcontractorUpdate,
    service: SubcontractorService = Depends(get_subcontractor_service),
) -> SubcontractorResponse:
    subcontractor = await service.update(subcontractor_id, data)
    return SubcontractorResponse.model_validate(subcontractor, from_attributes=True)


@router.delete(
    "/{subcontractor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_subcontractor(
    subcontractor_id: str,
    service: SubcontractorService = Depends(get_subcontractor_service),
) -> None:
    await service.delete(subcontractor_id)
