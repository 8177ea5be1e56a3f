"""Site material endpoints — deliveries to a project and their cost summary."""

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from construction_portal.application.schemas import (
    SiteMaterialCreate,
    SiteMaterialResponse,
    SiteMaterialUpdate,
    TablePageResponse,
    TableParams,
)
from construction_portal.application.services import MaterialService
from construction_portal.domain.entities import MaterialStatus
from construction_portal.infrastructure.dependencies import (
    get_material_service,
    get_table_params,
    require_password_confirmation,
)

router = APIRouter(prefix="/materials", tags=["Site Materials"])


@router.get("/project/{project_id}", response_model=TablePageResponse[SiteMaterialResponse])
async def list_project_materials(
    project_id: str,
    material: str | None = Query(None, description="Material name, e.g. Cement"),
    material_status: MaterialStatus | None = Query(None, alias="status"),
    params: TableParams = Depends(get_table_params),
    service: MaterialService = Depends(get_material_service),
) -> TablePageResponse[SiteMaterialResponse]:
    page = await service.list_for_project(
        project_id, params, material=material, status=material_status
    )
    return TablePageResponse[SiteMaterialResponse].model_validate(page, from_attributes=True)


@router.get("/project/{project_id}/summary")
async def project_material_summary(
    project_id: str,
    service: MaterialService = Depends(get_material_service),
) -> dict[str, Any]:
    """Upstream per-material totals for one project, passed through as-is."""
    return await service.project_summary(project_id)


@router.post("", response_model=SiteMaterialResponse, status_code=status.HTTP_201_CREATED)
async def create_material(
    data: SiteMaterialCreate,
    service: MaterialService = Depends(get_material_service),
) -> SiteMaterialResponse:
    material = await service.create(data)
    return SiteMaterialResponse.model_validate(material, from_attributes=True)


@router.put(
    "/{material_id}",
    response_model=SiteMaterialResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_material(
    material_id: str,
    data: SiteMaterialUpdate,
    service: MaterialService = Depends(get_material_service),
) -> SiteMaterialResponse:
    material = await service.update(material_id, data)
    return SiteMaterialResponse.model_validate(material, from_attributes=True)


@router.delete(
    "/{material_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_material(
    material_id: str,
    service: MaterialService = Depends(get_material_service),
) -> None:
    await service.delete(material_id)
