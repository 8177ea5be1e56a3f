from .crud_service import CrudService
from .auth_service import AuthService, PasswordGate
from .labourer_service import LabourerService
from .attendance_service import AttendanceService, MonthlyGrid
from .salary_service import EmployeeSalaryService, SalaryService
from .material_service import MaterialService
from .directory_services import CustomerService, SubcontractorService, SupplierService
from .transaction_service import ExpenseService, TransactionService
from .project_service import ProjectService, SiteDetail, SiteDetailService
from .report_service import ReportService
from .schedule_service import ScheduleService, WorkStatusChange
from .employee_service import EmployeeService
from .catalog_service import DashboardService, MaterialCatalogService

__all__ = [
    "CrudService",
    "AuthService",
    "PasswordGate",
    "LabourerService",
    "AttendanceService",
    "MonthlyGrid",
    "EmployeeSalaryService",
    "SalaryService",
    "MaterialService",
    "CustomerService",
    "SubcontractorService",
    "SupplierService",
    "ExpenseService",
    "TransactionService",
    "ProjectService",
    "SiteDetail",
    "SiteDetailService",
    "ReportService",
    "ScheduleService",
    "WorkStatusChange",
    "EmployeeService",
    "DashboardService",
    "MaterialCatalogService",
]
