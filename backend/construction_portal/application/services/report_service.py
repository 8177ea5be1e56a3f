"""Application service for report downloads."""

from construction_portal.application.interfaces import ReportGateway
from construction_portal.application.schemas.report import ExpenseReportRequest


class ReportService:
    """Reports are rendered upstream; the portal only relays the file."""

    def __init__(self, gateway: ReportGateway):
        self._gateway = gateway

    async def expense_report(self, request: ExpenseReportRequest) -> bytes:
        return await self._gateway.expense_report(
            list(request.report_types), request.start_date, request.end_date
        )

    @staticmethod
    def expense_report_filename(request: ExpenseReportRequest) -> str:
        return (
            f"expense-report-{request.start_date.isoformat()}"
            f"-to-{request.end_date.isoformat()}.pdf"
        )
