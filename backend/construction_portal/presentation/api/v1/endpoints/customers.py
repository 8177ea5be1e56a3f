"""Customer directory endpoints."""

from fastapi import APIRouter, Depends, Query, status

from construction_portal.application.schemas import (
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
    TablePageResponse,
    TableParams,
)
from construction_portal.application.schemas.directory import CustomerType, PartyStatus
from construction_portal.application.services import CustomerService
from construction_portal.infrastructure.dependencies import (
    get_customer_service,
    get_table_params,
    require_password_confirmation,
)

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("", response_model=TablePageResponse[CustomerResponse])
async def list_customers(
    customer_type: CustomerType | None = Query(None, alias="type"),
    party_status: PartyStatus | None = Query(None, alias="status"),
    params: TableParams = Depends(get_table_params),
    service: CustomerService = Depends(get_customer_service),
) -> TablePageResponse[CustomerResponse]:
    page = await service.list(
        params, upstream_filters={"type": customer_type, "status": party_status}
    )
    return TablePageResponse[CustomerResponse].model_validate(page, from_attributes=True)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    customer = await service.get(customer_id)
    return CustomerResponse.model_validate(customer, from_attributes=True)


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    data: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    customer = await service.create(data)
    return CustomerResponse.model_validate(customer, from_attributes=True)


@router.put(
    "/{customer_id}",
    response_model=CustomerResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_customer(
    customer_id: str,
    data: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    customer = await service.update(customer_id, data)
    return CustomerResponse.model_validate(customer, from_attributes=True)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> None:
    await service.delete(customer_id)
