"""Ports for project transactions and general expenses."""

from abc import ABC, abstractmethod
from typing import Any

from construction_portal.application.interfaces.crud_gateway import CrudGateway
from construction_portal.domain.entities import Expense, Transaction, TransactionPage


class TransactionGateway(ABC):
    """Transactions are read per project, with upstream paging and totals."""

    @abstractmethod
    async def list_for_project(
        self, project_id: str, filters: dict[str, Any] | None = None
    ) -> TransactionPage:
        ...

    @abstractmethod
    async def create(self, payload: dict[str, Any]) -> Transaction:
        ...

    @abstractmethod
    async def update(self, transaction_id: str, payload: dict[str, Any]) -> Transaction:
        ...

    @abstractmethod
    async def delete(self, transaction_id: str) -> bool:
        ...

    @abstractmethod
    async def project_summary(self, project_id: str) -> dict[str, Any]:
        """Totals and per-category breakdown for the whole project."""
        ...


class ExpenseGateway(CrudGateway[Expense]):
    pass
