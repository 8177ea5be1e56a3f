"""Port for server-generated report files."""

from abc import ABC, abstractmethod
from datetime import date


class ReportGateway(ABC):
    @abstractmethod
    async def expense_report(
        self, report_types: list[str], start_date: date, end_date: date
    ) -> bytes:
        """Return the rendered PDF bytes produced upstream."""
        ...
