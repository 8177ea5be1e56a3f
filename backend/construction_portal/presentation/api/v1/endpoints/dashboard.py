"""Dashboard and finance figures computed by the construction API."""

from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, Query

from construction_portal.application.schemas import DashboardStatsResponse
from construction_portal.application.services import DashboardService
from construction_portal.infrastructure.dependencies import get_dashboard_service, require_roles

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

_finance_viewers = require_roles("supervisor", "manager")


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_stats(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStatsResponse:
    """Income, expenses, balance and transaction count for the current month."""
    stats = await service.stats()
    return DashboardStatsResponse.model_validate(stats, from_attributes=True)


@router.get("/finance/overview", dependencies=[Depends(_finance_viewers)])
async def get_finance_overview(
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    service: DashboardService = Depends(get_dashboard_service),
) -> dict[str, Any]:
    return await service.finance_overview(start_date, end_date)


@router.get("/finance/trends", dependencies=[Depends(_finance_viewers)])
async def get_finance_trends(
    months: int = Query(12, ge=1, le=24),
    service: DashboardService = Depends(get_dashboard_service),
) -> dict[str, Any]:
    return await service.finance_trends(months)


@router.get("/finance/project-profitability", dependencies=[Depends(_finance_viewers)])
async def get_project_profitability(
    service: DashboardService = Depends(get_dashboard_service),
) -> list[dict[str, Any]]:
    return await service.project_profitability()
