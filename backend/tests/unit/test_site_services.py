"""Unit tests for subcontractor, salary, material, transaction and report services."""

from datetime import date, datetime, timezone

import pytest

from construction_portal.application.interfaces import (
    LabourSalaryGateway,
    ReportGateway,
    SiteMaterialGateway,
    SubcontractorGateway,
    TransactionGateway,
)
from construction_portal.application.schemas import TableParams
from construction_portal.application.schemas.directory import AppointmentCreate
from construction_portal.application.schemas.material import SiteMaterialCreate
from construction_portal.application.schemas.report import ExpenseReportRequest
from construction_portal.application.services import (
    MaterialService,
    ReportService,
    SalaryService,
    SubcontractorService,
    TransactionService,
)
from construction_portal.domain.entities import (
    Appointment,
    LabourSalary,
    MaterialStatus,
    SalaryStatus,
    SiteMaterial,
    Subcontractor,
    TransactionPage,
    TransactionType,
)
from construction_portal.domain.exceptions import EntityNotFoundError


def _subcontractor(sub_id: str, *project_ids: str) -> Subcontractor:
    return Subcontractor(
        id=sub_id, name=f"Sub {sub_id}", nic="901234567V", email=f"{sub_id}@example.com",
        phone="0770000000", contract_type="Electrical", address="Colombo",
        appointments=[Appointment(project_id=p, cost=1000) for p in project_ids],
    )


class FakeSubcontractorGateway(SubcontractorGateway):
    def __init__(self, rows):
        self.rows = {s.id: s for s in rows}
        self.appointments: list[tuple[str, dict]] = []

    async def list(self, filters=None):
        return list(self.rows.values())

    async def get(self, entity_id):
        return self.rows.get(entity_id)

    async def create(self, payload):
        raise NotImplementedError

    async def update(self, entity_id, payload):
        raise NotImplementedError

    async def delete(self, entity_id):
        return self.rows.pop(entity_id, None) is not None

    async def appoint(self, subcontractor_id, payload):
        self.appointments.append((subcontractor_id, payload))
        return Appointment(project_id=payload["project"], cost=payload["cost"])


class FakeSalaryGateway(LabourSalaryGateway):
    def __init__(self, rows):
        self.rows = rows
        self.filters: list[dict] = []
        self.updates: list[tuple[str, dict]] = []

    async def list(self, filters=None):
        self.filters.append(filters)
        return self.rows

    async def create(self, payload):
        raise NotImplementedError

    async def update(self, salary_id, payload):
        self.updates.append((salary_id, payload))
        return LabourSalary(labourer_id="l1", project_id="p1", amount=100,
                            payment_date=None, id=salary_id,
                            status=SalaryStatus(payload["status"]))

    async def delete(self, salary_id):
        return False


class FakeMaterialGateway(SiteMaterialGateway):
    def __init__(self, rows):
        self.rows = rows
        self.created: dict | None = None
        self.list_calls: list[tuple[str, dict]] = []

    async def list_for_project(self, project_id, filters=None):
        self.list_calls.append((project_id, filters))
        return self.rows

    async def create(self, payload):
        self.created = payload
        return SiteMaterial(project_id=payload["projectId"], material=payload["material"],
                            supplier=payload["supplier"], amount=payload["amount"],
                            amount_type=payload["amountType"],
                            total_cost=payload["totalCost"])

    async def update(self, material_id, payload):
        raise NotImplementedError

    async def delete(self, material_id):
        return False

    async def project_summary(self, project_id):
        return {"totalCost": 0}


class FakeTransactionGateway(TransactionGateway):
    def __init__(self):
        self.calls: list[tuple[str, dict]] = []

    async def list_for_project(self, project_id, filters=None):
        self.calls.append((project_id, filters))
        return TransactionPage()

    async def create(self, payload):
        raise NotImplementedError

    async def update(self, transaction_id, payload):
        raise NotImplementedError

    async def delete(self, transaction_id):
        return True

    async def project_summary(self, project_id):
        return {}


class FakeReportGateway(ReportGateway):
    def __init__(self):
        self.calls = []

    async def expense_report(self, report_types, start_date, end_date):
        self.calls.append((report_types, start_date, end_date))
        return b"%PDF-1.4"


# ── Subcontractors ──


@pytest.mark.asyncio
async def test_appoint_forwards_camel_case_payload():
    gateway = FakeSubcontractorGateway([_subcontractor("s1")])
    service = SubcontractorService(gateway)
    data = AppointmentCreate(
        project="p1",
        start_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        end_date=datetime(2024, 6, 30, tzinfo=timezone.utc),
        cost=250000,
    )

    appointment = await service.appoint("s1", data)

    sub_id, payload = gateway.appointments[0]
    assert sub_id == "s1"
    assert payload["startDate"].startswith("2024-01-01")
    assert appointment.project_id == "p1"


@pytest.mark.asyncio
async def test_appoint_unknown_subcontractor_raises():
    service = SubcontractorService(FakeSubcontractorGateway([]))
    data = AppointmentCreate(
        project="p1", start_date=datetime(2024, 1, 1), end_date=datetime(2024, 2, 1), cost=1
    )
    with pytest.raises(EntityNotFoundError):
        await service.appoint("missing", data)


@pytest.mark.asyncio
async def test_appointed_to_keeps_only_subcontractors_on_the_project():
    gateway = FakeSubcontractorGateway(
        [_subcontractor("s1", "p1"), _subcontractor("s2", "p2"), _subcontractor("s3", "p2", "p1")]
    )
    appointed = await SubcontractorService(gateway).appointed_to("p1")
    assert [s.id for s in appointed] == ["s1", "s3"]


# ── Labour salaries ──


@pytest.mark.asyncio
async def test_paid_total_only_counts_paid_rows():
    rows = [
        LabourSalary(labourer_id="l1", project_id="p1", amount=1500, payment_date=None,
                     status=SalaryStatus.PAID),
        LabourSalary(labourer_id="l2", project_id="p1", amount=2500.5, payment_date=None,
                     status=SalaryStatus.PAID),
        LabourSalary(labourer_id="l3", project_id="p1", amount=900, payment_date=None,
                     status=SalaryStatus.PENDING),
    ]
    gateway = FakeSalaryGateway(rows)

    total = await SalaryService(gateway).paid_total_by_project("p1")

    assert gateway.filters == [{"projectId": "p1", "status": "paid"}]
    assert total.total_paid == 4000.5
    assert total.count == 2


@pytest.mark.asyncio
async def test_update_status_sends_status_only():
    gateway = FakeSalaryGateway([])
    salary = await SalaryService(gateway).update_status("sal1", SalaryStatus.PAID)
    assert gateway.updates == [("sal1", {"status": "paid"})]
    assert salary.is_paid


@pytest.mark.asyncio
async def test_delete_missing_salary_raises():
    with pytest.raises(EntityNotFoundError):
        await SalaryService(FakeSalaryGateway([])).delete_salary("gone")


# ── Site materials ──


@pytest.mark.asyncio
async def test_material_list_filters_locally():
    rows = [
        SiteMaterial(project_id="p1", material="Cement", supplier="Tokyo", amount=50,
                     amount_type="Packs"),
        SiteMaterial(project_id="p1", material="Sand", supplier="River Co", amount=3,
                     amount_type="Cubes", status=MaterialStatus.ORDERED),
        SiteMaterial(project_id="p1", material="Cement", supplier="Insee", amount=20,
                     amount_type="Packs", status=MaterialStatus.ORDERED),
    ]
    gateway = FakeMaterialGateway(rows)

    page = await MaterialService(gateway).list_for_project(
        "p1", TableParams(), material="Cement", status="ordered"
    )

    assert gateway.list_calls == [("p1", {"limit": 1000})]
    assert [m.supplier for m in page.items] == ["Insee"]


@pytest.mark.asyncio
async def test_material_total_cost_defaults_to_amount_times_unit_cost():
    gateway = FakeMaterialGateway([])
    data = SiteMaterialCreate(
        project_id="p1", material="Cement", supplier="Tokyo", amount=40,
        amount_type="Packs", unit_cost=2150.5,
    )
    created = await MaterialService(gateway).create(data)
    assert gateway.created["totalCost"] == 86020.0
    assert created.total_cost == 86020.0


@pytest.mark.asyncio
async def test_delete_missing_material_raises():
    with pytest.raises(EntityNotFoundError):
        await MaterialService(FakeMaterialGateway([])).delete("m404")


# ── Transactions ──


@pytest.mark.asyncio
async def test_transaction_filters_are_sent_upstream():
    gateway = FakeTransactionGateway()
    await TransactionService(gateway).list_for_project(
        "p1", type=TransactionType.EXPENSE, start_date=date(2024, 1, 1), page=2, limit=25
    )
    project_id, filters = gateway.calls[0]
    assert project_id == "p1"
    assert filters == {
        "type": "expense",
        "category": None,
        "startDate": "2024-01-01",
        "endDate": None,
        "page": 2,
        "limit": 25,
    }


# ── Reports ──


@pytest.mark.asyncio
async def test_expense_report_relays_pdf():
    gateway = FakeReportGateway()
    request = ExpenseReportRequest(
        report_types=["income", "expense"], start_date=date(2024, 1, 1), end_date=date(2024, 3, 31)
    )
    service = ReportService(gateway)

    pdf = await service.expense_report(request)

    assert pdf.startswith(b"%PDF")
    assert gateway.calls == [(["income", "expense"], date(2024, 1, 1), date(2024, 3, 31))]
    assert service.expense_report_filename(request) == (
        "expense-report-2024-01-01-to-2024-03-31.pdf"
    )


def test_report_end_must_follow_start():
    with pytest.raises(ValueError):
        ExpenseReportRequest(
            report_types=["income"], start_date=date(2024, 3, 1), end_date=date(2024, 1, 1)
        )
