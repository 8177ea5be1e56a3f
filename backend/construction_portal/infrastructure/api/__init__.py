"""Upstream construction API infrastructure package."""

from .upstream_client import UpstreamApiClient
from .auth_gateway import HttpAuthGateway
from .employee_gateway import HttpEmployeeGateway
from .catalog_gateways import HttpDashboardGateway, HttpMaterialCatalogGateway
from .directory_gateways import HttpCustomerGateway, HttpSubcontractorGateway, HttpSupplierGateway
from .labour_gateways import (
    HttpAttendanceGateway,
    HttpEmployeeSalaryGateway,
    HttpLabourerGateway,
    HttpLabourSalaryGateway,
)
from .site_gateways import (
    HttpExpenseGateway,
    HttpProjectGateway,
    HttpReportGateway,
    HttpScheduleGateway,
    HttpSiteMaterialGateway,
    HttpTransactionGateway,
)

__all__ = [
    "UpstreamApiClient",
    "HttpAuthGateway",
    "HttpEmployeeGateway",
    "HttpDashboardGateway",
    "HttpMaterialCatalogGateway",
    "HttpCustomerGateway",
    "HttpSubcontractorGateway",
    "HttpSupplierGateway",
    "HttpAttendanceGateway",
    "HttpEmployeeSalaryGateway",
    "HttpLabourerGateway",
    "HttpLabourSalaryGateway",
    "HttpExpenseGateway",
    "HttpProjectGateway",
    "HttpReportGateway",
    "HttpScheduleGateway",
    "HttpSiteMaterialGateway",
    "HttpTransactionGateway",
]
