"""General expense ledger endpoints (finance section, not bound to a site)."""

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from construction_portal.application.schemas import (
    ExpenseCreate,
    ExpenseResponse,
    ExpenseUpdate,
    TablePageResponse,
    TableParams,
)
from construction_portal.application.services import ExpenseService
from construction_portal.domain.entities import TransactionType
from construction_portal.infrastructure.dependencies import (
    get_expense_service,
    get_table_params,
    require_password_confirmation,
)

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.get("", response_model=TablePageResponse[ExpenseResponse])
async def list_expenses(
    section: str | None = Query(None, description="Construction Site, Employee or Supplier"),
    entry_type: TransactionType | None = Query(None, alias="type"),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    params: TableParams = Depends(get_table_params),
    service: ExpenseService = Depends(get_expense_service),
) -> TablePageResponse[ExpenseResponse]:
    page = await service.list(
        params,
        upstream_filters={
            "section": section,
            "type": entry_type.value if entry_type else None,
            "startDate": start_date.isoformat() if start_date else None,
            "endDate": end_date.isoformat() if end_date else None,
        },
    )
    return TablePageResponse[ExpenseResponse].model_validate(page, from_attributes=True)


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(
    expense_id: str,
    service: ExpenseService = Depends(get_expense_service),
) -> ExpenseResponse:
    expense = await service.get(expense_id)
    return ExpenseResponse.model_validate(expense, from_attributes=True)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    data: ExpenseCreate,
    service: ExpenseService = Depends(get_expense_service),
) -> ExpenseResponse:
    expense = await service.create(data)
    return ExpenseResponse.model_validate(expense, from_attributes=True)


@router.put(
    "/{expense_id}",
    response_model=ExpenseResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_expense(
    expense_id: str,
    data: ExpenseUpdate,
    service: ExpenseService = Depends(get_expense_service),
) -> ExpenseResponse:
    expense = await service.update(expense_id, data)
    return ExpenseResponse.model_validate(expense, from_attributes=True)


@router.delete(
    "/{expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_expense(
    expense_id: str,
    service: ExpenseService = Depends(get_expense_service),
) -> None:
    await service.delete(expense_id)
