"""Map upstream JSON documents onto domain entities.

Upstream documents come from MongoDB: ids appear as ``_id`` (sometimes
``id``), references are either a bare id or a populated sub-document, and
optional fields are often missing altogether.
"""

from collections.abc import Callable
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from construction_portal.domain.entities import (
    Appointment,
    AttendanceRecord,
    AttendanceStatus,
    AuthUser,
    CatalogMaterial,
    Customer,
    DashboardStats,
    Department,
    Employee,
    EmployeeSalary,
    Expense,
    Labourer,
    LabourSalary,
    LabourStatus,
    MaterialStatus,
    PaymentSchedule,
    PaymentStatus,
    PayPeriod,
    Project,
    ProjectStatus,
    SalaryStatus,
    ShiftType,
    SiteAttendancePercentage,
    SiteMaterial,
    SkillLevel,
    Subcontractor,
    Supplier,
    Transaction,
    TransactionType,
    WorkSchedule,
    WorkStatus,
)

E = TypeVar("E", bound=Enum)
T = TypeVar("T")


def unwrap(body: Any, *keys: str) -> Any:
    """Return the first present envelope key, or the body itself."""
    if isinstance(body, dict):
        for key in keys:
            if body.get(key) is not None:
                return body[key]
    return body


def map_list(body: Any, mapper: Callable[[dict[str, Any]], T], *keys: str) -> list[T]:
    """Map the document list under the first present key.

    Anything other than a list maps to ``[]``; non-document entries are skipped.
    """
    rows = unwrap(body, *keys)
    if not isinstance(rows, list):
        return []
    return [mapper(doc) for doc in rows if isinstance(doc, dict)]


def doc_id(doc: dict[str, Any]) -> str:
    value = doc.get("_id", doc.get("id"))
    return str(value) if value is not None else ""


def ref_id(value: Any) -> str | None:
    """Id of a reference that may or may not have been populated."""
    if value is None or value == "":
        return None
    if isinstance(value, dict):
        return doc_id(value) or None
    return str(value)


def ref_field(value: Any, name: str) -> Any:
    if isinstance(value, dict):
        return value.get(name)
    return None


def parse_dt(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def to_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _enum(enum_cls: type[E], value: Any, default: E) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        return default


def _dig(doc: dict[str, Any], *path: str) -> Any:
    current: Any = doc
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


# ── Labour ──────────────────────────────────────────────────────────


def to_labourer(doc: dict[str, Any]) -> Labourer:
    return Labourer(
        id=doc_id(doc),
        name=doc.get("name", ""),
        contact=doc.get("contact", ""),
        base_salary=to_float(doc.get("baseSalary")),
        project_id=ref_id(doc.get("project")),
        labour_code=doc.get("labourId"),
        skill_level=_enum(SkillLevel, doc.get("skillLevel"), SkillLevel.NON_SKILLED),
        status=_enum(LabourStatus, doc.get("status"), LabourStatus.ACTIVE),
        created_at=parse_dt(doc.get("createdAt")),
    )


def to_attendance(doc: dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        id=doc_id(doc) or None,
        labourer_id=ref_id(doc.get("labour")) or "",
        labourer_name=ref_field(doc.get("labour"), "name"),
        project_id=ref_id(doc.get("project")),
        date=parse_dt(doc.get("date")) or datetime.min,
        status=_enum(AttendanceStatus, doc.get("status"), AttendanceStatus.ABSENT),
        shift_type=_enum(ShiftType, doc.get("shiftType"), ShiftType.DAY),
        hours_worked=to_float(doc.get("hoursWorked")),
        clock_in=parse_dt(doc.get("clockIn")),
        clock_out=parse_dt(doc.get("clockOut")),
        notes=doc.get("notes") or "",
    )


def to_site_percentage(doc: dict[str, Any]) -> SiteAttendancePercentage:
    return SiteAttendancePercentage(
        project_id=ref_id(doc.get("projectId")) or "",
        project_name=doc.get("projectName", ""),
        percentage=int(to_float(doc.get("percentage"))),
        present_count=int(to_float(doc.get("presentCount"))),
        total_count=int(to_float(doc.get("totalCount"))),
    )


def to_labour_salary(doc: dict[str, Any]) -> LabourSalary:
    return LabourSalary(
        id=doc_id(doc) or None,
        labourer_id=ref_id(doc.get("labour")) or "",
        labourer_name=ref_field(doc.get("labour"), "name"),
        project_id=ref_id(doc.get("project")),
        amount=to_float(doc.get("amount")),
        payment_date=parse_dt(doc.get("paymentDate")),
        pay_period=_enum(PayPeriod, doc.get("payPeriod"), PayPeriod.MONTHLY),
        status=_enum(SalaryStatus, doc.get("status"), SalaryStatus.PENDING),
        description=doc.get("description") or "",
    )


def to_employee_salary(doc: dict[str, Any]) -> EmployeeSalary:
    # Upstream ``id`` is the employee code; the document id is ``_id``.
    return EmployeeSalary(
        id=str(doc["_id"]) if doc.get("_id") is not None else None,
        employee_code=str(doc.get("id", "")),
        name=doc.get("name"),
        position=doc.get("position", ""),
        email=doc.get("email", ""),
        salary=to_float(doc.get("salary")),
        month=int(to_float(doc.get("month"))),
        year=int(to_float(doc.get("year"))),
        status=doc.get("status") or "not",
        payment_method=doc.get("paymentMethod") or "bank_transfer",
    )


# ── Sites ───────────────────────────────────────────────────────────


def to_site_material(doc: dict[str, Any]) -> SiteMaterial:
    return SiteMaterial(
        id=doc_id(doc) or None,
        project_id=ref_id(doc.get("projectId")) or "",
        material=doc.get("material", ""),
        supplier=doc.get("supplier", ""),
        amount=to_float(doc.get("amount")),
        amount_type=doc.get("amountType", ""),
        unit_cost=to_float(doc.get("unitCost")),
        total_cost=to_float(doc.get("totalCost")),
        received_date=parse_dt(doc.get("receivedDate")),
        expected_date=parse_dt(doc.get("expectedDate")),
        status=_enum(MaterialStatus, doc.get("status"), MaterialStatus.RECEIVED),
        notes=doc.get("notes") or "",
    )


def to_transaction(doc: dict[str, Any]) -> Transaction:
    return Transaction(
        id=doc_id(doc) or None,
        project_id=ref_id(doc.get("projectId")) or "",
        type=_enum(TransactionType, doc.get("type"), TransactionType.EXPENSE),
        category=doc.get("category", "Other"),
        description=doc.get("description", ""),
        amount=to_float(doc.get("amount")),
        date=parse_dt(doc.get("date")),
        payment_method=doc.get("paymentMethod") or "Cash",
        notes=doc.get("notes") or "",
        payment_slip_url=_dig(doc, "paymentSlip", "url"),
    )


def to_expense(doc: dict[str, Any]) -> Expense:
    return Expense(
        id=doc_id(doc) or None,
        section=doc.get("section", ""),
        description=doc.get("description", ""),
        type=_enum(TransactionType, doc.get("type"), TransactionType.EXPENSE),
        amount=to_float(doc.get("amount")),
        date=parse_dt(doc.get("date")),
        payment_slip=doc.get("paymentSlip") or "",
    )


def to_project(doc: dict[str, Any]) -> Project:
    customer_ref = doc.get("customerId")
    customer = to_customer(customer_ref) if isinstance(customer_ref, dict) else None
    return Project(
        id=doc_id(doc),
        name=doc.get("name", ""),
        supervisor=doc.get("supervisor", ""),
        location=doc.get("location", ""),
        start_date=parse_dt(doc.get("startDate")),
        end_date=parse_dt(doc.get("endDate")),
        duration=int(doc["duration"]) if doc.get("duration") is not None else None,
        estimated_cost=(
            to_float(doc["estimatedCost"]) if doc.get("estimatedCost") is not None else None
        ),
        document_file_no=doc.get("documentFileNo"),
        project_code=doc.get("projectId"),
        customer_id=ref_id(customer_ref),
        customer=customer,
        status=_enum(ProjectStatus, doc.get("status"), ProjectStatus.PLANNING),
        progress=int(to_float(doc.get("progress"))),
    )


def to_work_schedule(doc: dict[str, Any]) -> WorkSchedule:
    return WorkSchedule(
        id=doc_id(doc),
        project_id=ref_id(doc.get("project")) or "",
        section=doc.get("section", ""),
        step=str(doc.get("step", "")),
        title=doc.get("title", ""),
        status=_enum(WorkStatus, doc.get("status"), WorkStatus.PENDING),
        start_date=parse_dt(doc.get("startDate")),
        end_date=parse_dt(doc.get("endDate")),
        time_frame=doc.get("timeFrame") or "",
        work_description=doc.get("workDescription") or "",
        order=int(to_float(doc.get("order"))),
    )


def to_payment_schedule(doc: dict[str, Any]) -> PaymentSchedule:
    work = doc.get("workSchedule")
    return PaymentSchedule(
        id=doc_id(doc),
        project_id=ref_id(doc.get("project")) or "",
        step=str(doc.get("step", "")),
        payment_amount=to_float(doc.get("paymentAmount")),
        work_schedule_id=ref_id(work),
        section=ref_field(work, "section"),
        title=doc.get("title", ""),
        payment_status=_enum(PaymentStatus, doc.get("paymentStatus"), PaymentStatus.PENDING),
        due_date=parse_dt(doc.get("dueDate")),
        time_frame=doc.get("timeFrame") or "",
        start_date=parse_dt(doc.get("startDate")),
        end_date=parse_dt(doc.get("endDate")),
        order=int(to_float(doc.get("order"))),
    )


# ── Directory ───────────────────────────────────────────────────────


def to_supplier(doc: dict[str, Any]) -> Supplier:
    return Supplier(
        id=doc_id(doc),
        name=doc.get("name", ""),
        category=doc.get("category", ""),
        company_name=doc.get("companyName") or "",
        supplier_code=doc.get("supplierCode"),
        type=doc.get("type") or "distributor",
        email=_dig(doc, "contactInfo", "primaryContact", "email"),
        phone=_dig(doc, "contactInfo", "primaryContact", "phone"),
        city=_dig(doc, "address", "city"),
        status=doc.get("status") or "active",
        rating=_dig(doc, "performance", "rating"),
    )


def to_customer(doc: dict[str, Any]) -> Customer:
    return Customer(
        id=doc_id(doc),
        name=doc.get("name", ""),
        nic=doc.get("nic"),
        phone=doc.get("phone") or _dig(doc, "contactInfo", "primaryContact", "phone"),
        email=_dig(doc, "contactInfo", "primaryContact", "email") or doc.get("email"),
        company_name=doc.get("companyName") or "",
        customer_code=doc.get("customerCode"),
        type=doc.get("type") or "individual",
        street=_dig(doc, "address", "street"),
        city=_dig(doc, "address", "city"),
        state=_dig(doc, "address", "state"),
        status=doc.get("status") or "active",
    )


def to_appointment(doc: dict[str, Any]) -> Appointment:
    return Appointment(
        project_id=ref_id(doc.get("project")),
        cost=to_float(doc.get("cost")),
        start_date=parse_dt(doc.get("startDate")),
        end_date=parse_dt(doc.get("endDate")),
        appointed_at=parse_dt(doc.get("appointedAt")),
    )


def to_subcontractor(doc: dict[str, Any]) -> Subcontractor:
    return Subcontractor(
        id=doc_id(doc),
        name=doc.get("name", ""),
        nic=doc.get("nic", ""),
        email=doc.get("email", ""),
        phone=doc.get("phone", ""),
        contract_type=doc.get("contractType", ""),
        address=doc.get("address", ""),
        contract_id=doc.get("contractId"),
        status=doc.get("status") or "active",
        appointments=[to_appointment(a) for a in doc.get("appointments") or []],
    )


# ── Auth ────────────────────────────────────────────────────────────


def to_auth_user(doc: dict[str, Any]) -> AuthUser:
    name = doc.get("fullName") or " ".join(
        part for part in (doc.get("firstName"), doc.get("lastName")) if part
    )
    return AuthUser(
        id=doc_id(doc),
        email=doc.get("email", ""),
        role=doc.get("role", ""),
        name=name or doc.get("name", ""),
        position=doc.get("position"),
    )


def to_employee(doc: dict[str, Any]) -> Employee:
    salary = doc.get("salary")
    return Employee(
        id=doc_id(doc),
        first_name=doc.get("firstName", ""),
        last_name=doc.get("lastName", ""),
        email=doc.get("email", ""),
        role=doc.get("role") or "employee",
        employee_code=doc.get("employeeId"),
        department=_enum(Department, doc.get("department"), Department.CONSTRUCTION),
        phone_number=doc.get("phoneNumber"),
        salary=to_float(salary) if salary is not None else None,
        is_active=doc.get("isActive", True) is not False,
        hire_date=parse_dt(doc.get("hireDate")),
    )


# ── Material catalog & dashboard ────────────────────────────────────


def to_catalog_material(doc: dict[str, Any]) -> CatalogMaterial:
    return CatalogMaterial(
        id=doc_id(doc),
        material=doc.get("material") or doc.get("name", ""),
        supplier=doc.get("supplier", ""),
        amount=to_float(doc.get("amount", doc.get("quantity"))),
        amount_type=doc.get("amountType") or doc.get("unit", ""),
        received_date=parse_dt(doc.get("recDate") or doc.get("receivedDate")),
        description=doc.get("description") or "",
        updated_on=parse_dt(doc.get("updatedOn")),
    )


def to_dashboard_stats(doc: dict[str, Any]) -> DashboardStats:
    return DashboardStats(
        total_income=to_float(doc.get("totalIncome")),
        total_expenses=to_float(doc.get("totalExpenses")),
        current_balance=to_float(doc.get("currentBalance")),
        transaction_count=int(to_float(doc.get("transactionCount"))),
    )
