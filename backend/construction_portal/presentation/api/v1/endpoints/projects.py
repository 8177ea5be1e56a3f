"""Construction site (project) endpoints and the aggregated site detail view."""

from fastapi import APIRouter, Depends, Query, status

from construction_portal.application.schemas import (
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
    SiteDetailResponse,
    TablePageResponse,
    TableParams,
)
from construction_portal.application.services import ProjectService, SiteDetailService
from construction_portal.domain.entities import ProjectStatus
from construction_portal.infrastructure.dependencies import (
    get_project_service,
    get_site_detail_service,
    get_table_params,
    require_password_confirmation,
)

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=TablePageResponse[ProjectResponse])
async def list_projects(
    project_status: ProjectStatus | None = Query(None, alias="status"),
    location: str | None = Query(None),
    params: TableParams = Depends(get_table_params),
    service: ProjectService = Depends(get_project_service),
) -> TablePageResponse[ProjectResponse]:
    page = await service.list(
        params,
        upstream_filters={
            "status": project_status.value if project_status else None,
            "location": location,
        },
    )
    return TablePageResponse[ProjectResponse].model_validate(page, from_attributes=True)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    project = await service.get(project_id)
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.get("/{project_id}/site-detail", response_model=SiteDetailResponse)
async def get_site_detail(
    project_id: str,
    service: SiteDetailService = Depends(get_site_detail_service),
) -> SiteDetailResponse:
    """Everything the site page shows: customer, subcontractors, money and progress."""
    detail = await service.get_detail(project_id)
    return SiteDetailResponse.model_validate(detail, from_attributes=True)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    data: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    project = await service.create(data)
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.put(
    "/{project_id}",
    response_model=ProjectResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    project = await service.update(project_id, data)
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> None:
    await service.delete(project_id)
