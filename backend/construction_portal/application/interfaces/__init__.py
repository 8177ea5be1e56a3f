from .crud_gateway import CrudGateway
from .auth_gateway import AuthGateway
from .employee_gateway import EmployeeGateway
from .login_session_repository import LoginSessionRepository
from .labourer_gateway import LabourerGateway
from .attendance_gateway import AttendanceGateway
from .salary_gateway import EmployeeSalaryGateway, LabourSalaryGateway
from .material_gateway import MaterialCatalogGateway, SiteMaterialGateway
from .directory_gateways import CustomerGateway, SubcontractorGateway, SupplierGateway
from .transaction_gateway import ExpenseGateway, TransactionGateway
from .project_gateway import ProjectGateway, ScheduleGateway
from .report_gateway import ReportGateway
from .dashboard_gateway import DashboardGateway

__all__ = [
    "CrudGateway",
    "AuthGateway",
    "EmployeeGateway",
    "LoginSessionRepository",
    "LabourerGateway",
    "AttendanceGateway",
    "EmployeeSalaryGateway",
    "LabourSalaryGateway",
    "MaterialCatalogGateway",
    "SiteMaterialGateway",
    "CustomerGateway",
    "SubcontractorGateway",
    "SupplierGateway",
    "ExpenseGateway",
    "TransactionGateway",
    "ProjectGateway",
    "ScheduleGateway",
    "ReportGateway",
    "DashboardGateway",
]
