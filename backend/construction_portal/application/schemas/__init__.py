from .common import ApiPayload, TablePageResponse, TableParams
from .auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PasswordUpdateRequest,
    RegisterRequest,
    UserResponse,
)
from .labourer import LabourerCreate, LabourerResponse, LabourerUpdate
from .attendance import (
    AttendanceCreate,
    AttendanceGridResponse,
    AttendanceMarkEntry,
    AttendanceMarkRequest,
    AttendanceMarkResponse,
    AttendanceResponse,
    AttendanceRowResponse,
    AttendanceUpdate,
    SiteAttendancePercentageResponse,
)
from .salary import (
    EmployeeSalaryCreate,
    EmployeeSalaryResponse,
    EmployeeSalaryUpdate,
    LabourSalaryCreate,
    LabourSalaryResponse,
    LabourSalaryUpdate,
    PaidSalaryTotalResponse,
)
from .material import SiteMaterialCreate, SiteMaterialResponse, SiteMaterialUpdate
from .directory import (
    AppointmentCreate,
    AppointmentResponse,
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
    SubcontractorCreate,
    SubcontractorResponse,
    SubcontractorUpdate,
    SupplierCreate,
    SupplierResponse,
    SupplierUpdate,
)
from .transaction import (
    ExpenseCreate,
    ExpenseResponse,
    ExpenseUpdate,
    TransactionCreate,
    TransactionPageResponse,
    TransactionResponse,
    TransactionTotalsResponse,
    TransactionUpdate,
)
from .project import (
    FinancialSummaryResponse,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
    SiteDetailResponse,
    TaskProgressResponse,
)
from .report import ExpenseReportRequest
from .schedule import (
    PaymentPlanRequest,
    PaymentPlanStep,
    PaymentScheduleCreate,
    PaymentScheduleResponse,
    PaymentScheduleUpdate,
    WorkPlanRequest,
    WorkPlanStep,
    WorkScheduleCreate,
    WorkScheduleResponse,
    WorkScheduleUpdate,
    WorkStatusResponse,
    WorkStatusUpdate,
)
from .employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from .catalog import (
    CatalogMaterialCreate,
    CatalogMaterialResponse,
    CatalogMaterialUpdate,
    DashboardStatsResponse,
    StockUpdate,
)

__all__ = [
    "ApiPayload",
    "TablePageResponse",
    "TableParams",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PasswordUpdateRequest",
    "RegisterRequest",
    "UserResponse",
    "LabourerCreate",
    "LabourerResponse",
    "LabourerUpdate",
    "AttendanceCreate",
    "AttendanceGridResponse",
    "AttendanceMarkEntry",
    "AttendanceMarkRequest",
    "AttendanceMarkResponse",
    "AttendanceResponse",
    "AttendanceRowResponse",
    "AttendanceUpdate",
    "SiteAttendancePercentageResponse",
    "EmployeeSalaryCreate",
    "EmployeeSalaryResponse",
    "EmployeeSalaryUpdate",
    "LabourSalaryCreate",
    "LabourSalaryResponse",
    "LabourSalaryUpdate",
    "PaidSalaryTotalResponse",
    "SiteMaterialCreate",
    "SiteMaterialResponse",
    "SiteMaterialUpdate",
    "AppointmentCreate",
    "AppointmentResponse",
    "CustomerCreate",
    "CustomerResponse",
    "CustomerUpdate",
    "SubcontractorCreate",
    "SubcontractorResponse",
    "SubcontractorUpdate",
    "SupplierCreate",
    "SupplierResponse",
    "SupplierUpdate",
    "ExpenseCreate",
    "ExpenseResponse",
    "ExpenseUpdate",
    "TransactionCreate",
    "TransactionPageResponse",
    "TransactionResponse",
    "TransactionTotalsResponse",
    "TransactionUpdate",
    "FinancialSummaryResponse",
    "ProjectCreate",
    "ProjectResponse",
    "ProjectUpdate",
    "SiteDetailResponse",
    "TaskProgressResponse",
    "ExpenseReportRequest",
    "PaymentPlanRequest",
    "PaymentPlanStep",
    "PaymentScheduleCreate",
    "PaymentScheduleResponse",
    "PaymentScheduleUpdate",
    "WorkPlanRequest",
    "WorkPlanStep",
    "WorkScheduleCreate",
    "WorkScheduleResponse",
    "WorkScheduleUpdate",
    "WorkStatusResponse",
    "WorkStatusUpdate",
    "EmployeeCreate",
    "EmployeeResponse",
    "EmployeeUpdate",
    "CatalogMaterialCreate",
    "CatalogMaterialResponse",
    "CatalogMaterialUpdate",
    "DashboardStatsResponse",
    "StockUpdate",
]
