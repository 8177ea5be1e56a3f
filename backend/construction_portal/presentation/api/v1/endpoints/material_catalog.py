"""Material database endpoints — the stock catalog, separate from site deliveries."""

from fastapi import APIRouter, Depends, status

from construction_portal.application.schemas import (
    CatalogMaterialCreate,
    CatalogMaterialResponse,
    CatalogMaterialUpdate,
    StockUpdate,
    TablePageResponse,
    TableParams,
)
from construction_portal.application.services import MaterialCatalogService
from construction_portal.infrastructure.dependencies import (
    get_material_catalog_service,
    get_table_params,
    require_password_confirmation,
)

router = APIRouter(prefix="/material-catalog", tags=["Material Catalog"])


@router.get("", response_model=TablePageResponse[CatalogMaterialResponse])
async def list_catalog_materials(
    params: TableParams = Depends(get_table_params),
    service: MaterialCatalogService = Depends(get_material_catalog_service),
) -> TablePageResponse[CatalogMaterialResponse]:
    page = await service.list(params)
    return TablePageResponse[CatalogMaterialResponse].model_validate(page, from_attributes=True)


@router.get("/{material_id}", response_model=CatalogMaterialResponse)
async def get_catalog_material(
    material_id: str,
    service: MaterialCatalogService = Depends(get_material_catalog_service),
) -> CatalogMaterialResponse:
    material = await service.get(material_id)
    return CatalogMaterialResponse.model_validate(material, from_attributes=True)


@router.post("", response_model=CatalogMaterialResponse, status_code=status.HTTP_201_CREATED)
async def create_catalog_material(
    data: CatalogMaterialCreate,
    service: MaterialCatalogService = Depends(get_material_catalog_service),
) -> CatalogMaterialResponse:
    material = await service.create(data)
    return CatalogMaterialResponse.model_validate(material, from_attributes=True)


@router.patch(
    "/{material_id}/stock",
    response_model=CatalogMaterialResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_stock(
    material_id: str,
    data: StockUpdate,
    service: MaterialCatalogService = Depends(get_material_catalog_service),
) -> CatalogMaterialResponse:
    material = await service.update_stock(material_id, data.quantity)
    return CatalogMaterialResponse.model_validate(material, from_attributes=True)


@router.put(
    "/{material_id}",
    response_model=CatalogMaterialResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_catalog_material(
    material_id: str,
    data: CatalogMaterialUpdate,
    service: MaterialCatalogService = Depends(get_material_catalog_service),
) -> CatalogMaterialResponse:
    material = await service.update(material_id, data)
    return CatalogMaterialResponse.model_validate(material, from_attributes=True)


@router.delete(
    "/{material_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_catalog_material(
    material_id: str,
    service: MaterialCatalogService = Depends(get_material_catalog_service),
) -> None:
    await service.delete(material_id)
