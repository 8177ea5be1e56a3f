from .auth import AuthUser, LoginSession
from .employee import Department, Employee
from .labourer import Labourer, LabourStatus, SkillLevel
from .attendance import (
    AttendanceRecord,
    AttendanceStatus,
    LabourerAttendanceRow,
    ShiftType,
    SiteAttendancePercentage,
)
from .salary import EmployeeSalary, LabourSalary, PayPeriod, SalaryStatus
from .material import CatalogMaterial, MaterialStatus, SiteMaterial
from .dashboard import DashboardStats
from .directory import Appointment, Customer, Subcontractor, Supplier
from .transaction import (
    Expense,
    Transaction,
    TransactionCategory,
    TransactionPage,
    TransactionTotals,
    TransactionType,
)
from .project import (
    PaymentSchedule,
    PaymentStatus,
    Project,
    ProjectStatus,
    ScheduleSection,
    WorkSchedule,
    WorkStatus,
)

__all__ = [
    "AuthUser",
    "LoginSession",
    "Department",
    "Employee",
    "Labourer",
    "LabourStatus",
    "SkillLevel",
    "AttendanceRecord",
    "AttendanceStatus",
    "LabourerAttendanceRow",
    "ShiftType",
    "SiteAttendancePercentage",
    "EmployeeSalary",
    "LabourSalary",
    "PayPeriod",
    "SalaryStatus",
    "CatalogMaterial",
    "MaterialStatus",
    "SiteMaterial",
    "DashboardStats",
    "Appointment",
    "Customer",
    "Subcontractor",
    "Supplier",
    "Expense",
    "Transaction",
    "TransactionCategory",
    "TransactionPage",
    "TransactionTotals",
    "TransactionType",
    "PaymentSchedule",
    "PaymentStatus",
    "Project",
    "ProjectStatus",
    "ScheduleSection",
    "WorkSchedule",
    "WorkStatus",
]
