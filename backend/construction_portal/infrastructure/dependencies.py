"""FastAPI dependency injection — wires infrastructure to application layer."""

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import timedelta

import httpx
from fastapi import Depends, Header, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from construction_portal.application.services import (
    AttendanceService,
    AuthService,
    CustomerService,
    DashboardService,
    EmployeeSalaryService,
    EmployeeService,
    ExpenseService,
    LabourerService,
    MaterialCatalogService,
    MaterialService,
    PasswordGate,
    ProjectService,
    ReportService,
    SalaryService,
    ScheduleService,
    SiteDetailService,
    SubcontractorService,
    SupplierService,
    TransactionService,
)
from construction_portal.application.schemas import TableParams
from construction_portal.config import get_settings
from construction_portal.domain.entities import LoginSession
from construction_portal.domain.exceptions import AuthenticationError, PermissionDeniedError
from construction_portal.infrastructure.api import (
    HttpAttendanceGateway,
    HttpAuthGateway,
    HttpCustomerGateway,
    HttpDashboardGateway,
    HttpEmployeeGateway,
    HttpEmployeeSalaryGateway,
    HttpExpenseGateway,
    HttpLabourerGateway,
    HttpLabourSalaryGateway,
    HttpMaterialCatalogGateway,
    HttpProjectGateway,
    HttpReportGateway,
    HttpScheduleGateway,
    HttpSiteMaterialGateway,
    HttpSubcontractorGateway,
    HttpSupplierGateway,
    HttpTransactionGateway,
    UpstreamApiClient,
)
from construction_portal.infrastructure.database.repositories import (
    SQLAlchemyLoginSessionRepository,
)
from construction_portal.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


# ── Upstream client & login session ─────────────────────────────────


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient | None, None]:
    """Shared transport for upstream calls; ``None`` opens a client per request."""
    yield None


async def get_anonymous_client(
    http_client: httpx.AsyncClient | None = Depends(get_http_client),
) -> AsyncGenerator[UpstreamApiClient, None]:
    """Upstream client without a token — for login and registration."""
    settings = get_settings()
    yield UpstreamApiClient(
        settings.api_base_url, timeout=settings.api_timeout_seconds, http_client=http_client
    )


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    client: UpstreamApiClient = Depends(get_anonymous_client),
) -> AsyncGenerator[AuthService, None]:
    """Provides an AuthService for login, registration and session lookup."""
    settings = get_settings()
    yield AuthService(
        HttpAuthGateway(client),
        SQLAlchemyLoginSessionRepository(session),
        idle_timeout=timedelta(hours=settings.session_idle_hours),
    )


async def get_current_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    auth_service: AuthService = Depends(get_auth_service),
    session: AsyncSession = Depends(get_db_session),
) -> LoginSession:
    """The caller's login session, from ``Authorization: Bearer <session id>``."""
    session_id = credentials.credentials if credentials else None
    try:
        return await auth_service.resolve_session(session_id)
    except AuthenticationError:
        # Keep the removal of an idle session; the request itself rolls back.
        await session.commit()
        raise


async def get_upstream_client(
    login: LoginSession = Depends(get_current_session),
    session: AsyncSession = Depends(get_db_session),
    http_client: httpx.AsyncClient | None = Depends(get_http_client),
) -> AsyncGenerator[UpstreamApiClient, None]:
    """Upstream client carrying the caller's token.

    When upstream rejects the token the login session is deleted and
    committed right away, since the request itself will fail and roll back.
    """
    settings = get_settings()
    repository = SQLAlchemyLoginSessionRepository(session)

    async def force_logout() -> None:
        await repository.delete(login.id)
        await session.commit()
        logger.info("Forced logout of %s: upstream rejected the token", login.user.email)

    yield UpstreamApiClient(
        settings.api_base_url,
        token=login.token,
        timeout=settings.api_timeout_seconds,
        on_unauthorized=force_logout,
        http_client=http_client,
    )


async def get_account_service(
    session: AsyncSession = Depends(get_db_session),
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[AuthService, None]:
    """AuthService acting as the logged-in user (me, password change, logout)."""
    yield AuthService(HttpAuthGateway(client), SQLAlchemyLoginSessionRepository(session))


def require_roles(*roles: str) -> Callable[..., Awaitable[LoginSession]]:
    """Dependency factory — the caller must hold one of ``roles``."""

    async def _check(login: LoginSession = Depends(get_current_session)) -> LoginSession:
        if not login.user.has_role(roles):
            raise PermissionDeniedError(roles)
        return login

    return _check


async def get_password_gate(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[PasswordGate, None]:
    yield PasswordGate(HttpAuthGateway(client))


async def require_password_confirmation(
    x_confirm_password: str | None = Header(None, alias="X-Confirm-Password"),
    gate: PasswordGate = Depends(get_password_gate),
) -> None:
    """Edits and deletes must carry the account password in ``X-Confirm-Password``."""
    await gate.confirm(x_confirm_password)


# ── Entity services ─────────────────────────────────────────────────


async def get_labourer_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[LabourerService, None]:
    yield LabourerService(HttpLabourerGateway(client))


async def get_attendance_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[AttendanceService, None]:
    yield AttendanceService(HttpAttendanceGateway(client), HttpLabourerGateway(client))


async def get_salary_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[SalaryService, None]:
    yield SalaryService(HttpLabourSalaryGateway(client))


async def get_employee_salary_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[EmployeeSalaryService, None]:
    yield EmployeeSalaryService(HttpEmployeeSalaryGateway(client))


async def get_material_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[MaterialService, None]:
    yield MaterialService(HttpSiteMaterialGateway(client))


async def get_supplier_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[SupplierService, None]:
    yield SupplierService(HttpSupplierGateway(client))


async def get_customer_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[CustomerService, None]:
    yield CustomerService(HttpCustomerGateway(client))


async def get_subcontractor_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[SubcontractorService, None]:
    yield SubcontractorService(HttpSubcontractorGateway(client))


async def get_transaction_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[TransactionService, None]:
    yield TransactionService(HttpTransactionGateway(client))


async def get_expense_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[ExpenseService, None]:
    yield ExpenseService(HttpExpenseGateway(client))


async def get_project_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[ProjectService, None]:
    yield ProjectService(HttpProjectGateway(client))


async def get_site_detail_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[SiteDetailService, None]:
    """Provides a SiteDetailService with every gateway it aggregates over."""
    yield SiteDetailService(
        projects=HttpProjectGateway(client),
        customers=HttpCustomerGateway(client),
        subcontractors=HttpSubcontractorGateway(client),
        transactions=HttpTransactionGateway(client),
        salaries=HttpLabourSalaryGateway(client),
        schedules=HttpScheduleGateway(client),
    )


async def get_report_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[ReportService, None]:
    yield ReportService(HttpReportGateway(client))


async def get_schedule_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[ScheduleService, None]:
    yield ScheduleService(HttpScheduleGateway(client))


async def get_employee_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[EmployeeService, None]:
    yield EmployeeService(HttpEmployeeGateway(client))


async def get_material_catalog_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[MaterialCatalogService, None]:
    yield MaterialCatalogService(HttpMaterialCatalogGateway(client))


async def get_dashboard_service(
    client: UpstreamApiClient = Depends(get_upstream_client),
) -> AsyncGenerator[DashboardService, None]:
    yield DashboardService(HttpDashboardGateway(client))


# ── List views ──────────────────────────────────────────────────────


def get_table_params(
    search: str | None = Query(None, description="Case-insensitive text search"),
    sort_by: str | None = Query(None, description="Field to sort on"),
    sort_desc: bool = Query(False),
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=500),
) -> TableParams:
    """Search / sort / paging query parameters shared by every list endpoint."""
    return TableParams(
        search=search, sort_by=sort_by, sort_desc=sort_desc, page=page, page_size=page_size
    )
