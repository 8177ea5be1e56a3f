"""Application services for project transactions and general expenses."""

from datetime import date
from typing import Any

from construction_portal.application.interfaces import ExpenseGateway, TransactionGateway
from construction_portal.application.schemas.transaction import (
    TransactionCreate,
    TransactionUpdate,
)
from construction_portal.application.services.crud_service import CrudService
from construction_portal.domain.entities import (
    Expense,
    Transaction,
    TransactionCategory,
    TransactionPage,
    TransactionType,
)
from construction_portal.domain.exceptions import EntityNotFoundError


class TransactionService:
    def __init__(self, gateway: TransactionGateway):
        self._gateway = gateway

    async def list_for_project(
        self,
        project_id: str,
        *,
        type: TransactionType | None = None,
        category: TransactionCategory | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> TransactionPage:
        """One upstream page, filtered upstream, with totals over the whole filter."""
        return await self._gateway.list_for_project(
            project_id,
            {
                "type": type.value if type else None,
                "category": category.value if category else None,
                "startDate": start_date.isoformat() if start_date else None,
                "endDate": end_date.isoformat() if end_date else None,
                "page": page,
                "limit": limit,
            },
        )

    async def create(self, data: TransactionCreate) -> Transaction:
        return await self._gateway.create(data.to_api())

    async def update(self, transaction_id: str, data: TransactionUpdate) -> Transaction:
        return await self._gateway.update(transaction_id, data.changed_fields())

    async def delete(self, transaction_id: str) -> None:
        if not await self._gateway.delete(transaction_id):
            raise EntityNotFoundError("Transaction", transaction_id)

    async def project_summary(self, project_id: str) -> dict[str, Any]:
        return await self._gateway.project_summary(project_id)


class ExpenseService(CrudService[Expense]):
    entity_name = "Expense"
    search_fields = ("description", "section")
    sortable_fields = ("date", "amount", "section", "type", "description")

    def __init__(self, gateway: ExpenseGateway):
        super().__init__(gateway)
