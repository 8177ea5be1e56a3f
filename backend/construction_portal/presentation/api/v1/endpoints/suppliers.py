"""Supplier directory endpoints."""

from fastapi import APIRouter, Depends, Query, status

from construction_portal.application.schemas import (
    SupplierCreate,
    SupplierResponse,
    SupplierUpdate,
    TablePageResponse,
    TableParams,
)
from construction_portal.application.schemas.directory import PartyStatus, SupplierCategory
from construction_portal.application.services import SupplierService
from construction_portal.infrastructure.dependencies import (
    get_supplier_service,
    get_table_params,
    require_password_confirmation,
)

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


@router.get("", response_model=TablePageResponse[SupplierResponse])
async def list_suppliers(
    category: SupplierCategory | None = Query(None),
    party_status: PartyStatus | None = Query(None, alias="status"),
    params: TableParams = Depends(get_table_params),
    service: SupplierService = Depends(get_supplier_service),
) -> TablePageResponse[SupplierResponse]:
    page = await service.list(
        params, upstream_filters={"category": category, "status": party_status}
    )
    return TablePageResponse[SupplierResponse].model_validate(page, from_attributes=True)


@router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_supplier(
    supplier_id: str,
    service: SupplierService = Depends(get_supplier_service),
) -> SupplierResponse:
    supplier = await service.get(supplier_id)
    return SupplierResponse.model_validate(supplier, from_attributes=True)


@router.post("", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
async def create_supplier(
    data: SupplierCreate,
    service: SupplierService = Depends(get_supplier_service),
) -> SupplierResponse:
    supplier = await service.create(data)
    return SupplierResponse.model_validate(supplier, from_attributes=True)


@router.put(
    "/{supplier_id}",
    response_model=SupplierResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_supplier(
    supplier_id: str,
    data: SupplierUpdate,
    service: SupplierService = Depends(get_supplier_service),
) -> SupplierResponse:
    supplier = await service.update(supplier_id, data)
    return SupplierResponse.model_validate(supplier, from_attributes=True)


@router.delete(
    "/{supplier_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_supplier(
    supplier_id: str,
    service: SupplierService = Depends(get_supplier_service),
) -> None:
    await service.delete(supplier_id)
