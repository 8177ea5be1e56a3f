"""Report downloads, rendered upstream and streamed back as PDF."""

from fastapi import APIRouter, Depends, Response

from construction_portal.application.schemas import ExpenseReportRequest
from construction_portal.application.services import ReportService
from construction_portal.infrastructure.dependencies import get_report_service

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.post(
    "/expenses",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def download_expense_report(
    data: ExpenseReportRequest,
    service: ReportService = Depends(get_report_service),
) -> Response:
    """Income/expense report for a date range as a PDF attachment."""
    pdf = await service.expense_report(data)
    filename = service.expense_report_filename(data)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
