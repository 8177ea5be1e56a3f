"""Port for the dashboard and finance aggregates computed upstream."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any

from construction_portal.domain.entities import DashboardStats


class DashboardGateway(ABC):
    @abstractmethod
    async def stats(self) -> DashboardStats:
        """Income, expenses and balance for the current month."""
        ...

    @abstractmethod
    async def finance_overview(
        self, start_date: date | None = None, end_date: date | None = None
    ) -> dict[str, Any]:
        ...

    @abstractmethod
    async def finance_trends(self, months: int) -> dict[str, Any]:
        ...

    @abstractmethod
    async def project_profitability(self) -> list[dict[str, Any]]:
        ...
