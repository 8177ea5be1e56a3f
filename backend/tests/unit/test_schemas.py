"""Unit tests for request DTO validation and upstream payload shaping."""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from construction_portal.application.schemas import (
    AppointmentCreate,
    EmployeeSalaryCreate,
    ExpenseReportRequest,
    LabourerCreate,
    LabourerUpdate,
    ProjectCreate,
    SiteMaterialCreate,
    TableParams,
)
from construction_portal.domain.exceptions import InvalidTableQueryError


def test_payload_accepts_snake_or_camel_case_and_emits_camel_case():
    from_snake = LabourerCreate(name="Nimal", contact="0771", base_salary=3500, project="p1")
    from_camel = LabourerCreate.model_validate(
        {"name": "Nimal", "contact": "0771", "baseSalary": 3500, "project": "p1"}
    )
    assert from_snake.to_api() == from_camel.to_api()
    assert from_snake.to_api() == {
        "name": "Nimal",
        "contact": "0771",
        "baseSalary": 3500.0,
        "project": "p1",
        "skillLevel": "Non",
        "status": "active",
    }


def test_changed_fields_only_sends_what_was_set():
    update = LabourerUpdate(base_salary=4000)
    assert update.changed_fields() == {"baseSalary": 4000.0}


def test_labourer_validation_limits():
    with pytest.raises(ValidationError):
        LabourerCreate(name="", contact="0771", base_salary=1, project="p1")
    with pytest.raises(ValidationError):
        LabourerCreate(name="Nimal", contact="0771", base_salary=-1, project="p1")


def test_material_total_cost_defaults_to_amount_times_unit_cost():
    material = SiteMaterialCreate(
        project_id="p1", material="Cement", supplier="Tokyo", amount=12,
        amount_type="Packs", unit_cost=1850.5,
    )
    assert material.to_api()["totalCost"] == 22206.0

    explicit = SiteMaterialCreate(
        project_id="p1", material="Sand", supplier="River", amount=2,
        amount_type="Cubes", unit_cost=100, total_cost=150,
    )
    assert explicit.to_api()["totalCost"] == 150


def test_material_rejects_unknown_names():
    with pytest.raises(ValidationError):
        SiteMaterialCreate(
            project_id="p1", material="Gold", supplier="x", amount=1, amount_type="Kg"
        )


def test_employee_salary_sends_employee_code_as_id():
    salary = EmployeeSalaryCreate.model_validate(
        {"id": "EMP-7", "position": "supervisor", "email": "a@b.lk",
         "salary": 90000, "month": 3, "year": 2024}
    )
    payload = salary.to_api()
    assert payload["id"] == "EMP-7"
    assert payload["status"] == "not"
    assert payload["paymentMethod"] == "bank_transfer"


@pytest.mark.parametrize("month", [0, 13])
def test_employee_salary_month_is_one_based(month):
    with pytest.raises(ValidationError):
        EmployeeSalaryCreate.model_validate(
            {"id": "E1", "position": "employee", "email": "a@b.lk",
             "salary": 1, "month": month, "year": 2024}
        )


def test_date_ranges_must_not_end_before_they_start():
    with pytest.raises(ValidationError):
        ProjectCreate(
            name="Villa", supervisor="Sunil", location="Kandy",
            start_date=datetime(2024, 5, 1), end_date=datetime(2024, 4, 1),
            duration=30, estimated_cost=1, document_file_no="D1",
        )
    with pytest.raises(ValidationError):
        AppointmentCreate(
            project="p1", start_date=datetime(2024, 5, 2), end_date=datetime(2024, 5, 1), cost=1
        )
    with pytest.raises(ValidationError):
        ExpenseReportRequest(
            report_types=["income"], start_date=date(2024, 2, 1), end_date=date(2024, 1, 1)
        )


def test_report_needs_at_least_one_type():
    with pytest.raises(ValidationError):
        ExpenseReportRequest(report_types=[], start_date=date(2024, 1, 1), end_date=date(2024, 1, 2))


def test_table_params_build_a_query():
    query = TableParams(search="nim", sort_by="name", page=2, page_size=5).to_query(
        ("name",), {"status": "active"}
    )
    assert query.search_fields == ("name",)
    assert query.filters == {"status": "active"}
    assert (query.page, query.page_size) == (2, 5)


def test_table_params_reject_unsortable_field():
    params = TableParams(sort_by="customer")
    with pytest.raises(InvalidTableQueryError) as exc:
        params.to_query(("name",), sortable_fields=("name", "status"))
    assert exc.value.field == "customer"
    assert "name, status" in exc.value.message


def test_table_params_without_sortable_fields_accept_any_sort():
    assert TableParams(sort_by="anything").to_query(("name",)).sort_by == "anything"
