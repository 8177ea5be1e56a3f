"""Project transaction endpoints — income and expenses booked against a site."""

from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, Query, status

from construction_portal.application.schemas import (
    TransactionCreate,
    TransactionPageResponse,
    TransactionResponse,
    TransactionUpdate,
)
from construction_portal.application.services import TransactionService
from construction_portal.domain.entities import TransactionCategory, TransactionType
from construction_portal.infrastructure.dependencies import (
    get_transaction_service,
    require_password_confirmation,
)

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("/project/{project_id}", response_model=TransactionPageResponse)
async def list_project_transactions(
    project_id: str,
    transaction_type: TransactionType | None = Query(None, alias="type"),
    category: TransactionCategory | None = Query(None),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=10000),
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionPageResponse:
    """One page of a project's transactions.

    Filtering and paging happen upstream; ``summary`` covers every
    transaction matching the filter, not just this page.
    """
    result = await service.list_for_project(
        project_id,
        type=transaction_type,
        category=category,
        start_date=start_date,
        end_date=end_date,
        page=page,
        limit=limit,
    )
    return TransactionPageResponse.model_validate(result, from_attributes=True)


@router.get("/project/{project_id}/summary")
async def project_transaction_summary(
    project_id: str,
    service: TransactionService = Depends(get_transaction_service),
) -> dict[str, Any]:
    return await service.project_summary(project_id)


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    data: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    transaction = await service.create(data)
    return TransactionResponse.model_validate(transaction, from_attributes=True)


@router.put(
    "/{transaction_id}",
    response_model=TransactionResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_transaction(
    transaction_id: str,
    data: TransactionUpdate,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    transaction = await service.update(transaction_id, data)
    return TransactionResponse.model_validate(transaction, from_attributes=True)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service),
) -> None:
    await service.delete(transaction_id)
