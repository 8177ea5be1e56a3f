"""Salary endpoints — labourer wage payments and staff monthly salaries."""

from typing import Literal

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from construction_portal.application.schemas import (
    EmployeeSalaryCreate,
    EmployeeSalaryResponse,
    EmployeeSalaryUpdate,
    LabourSalaryCreate,
    LabourSalaryResponse,
    LabourSalaryUpdate,
    PaidSalaryTotalResponse,
    TablePageResponse,
    TableParams,
)
from construction_portal.application.services import EmployeeSalaryService, SalaryService
from construction_portal.domain.entities import SalaryStatus
from construction_portal.infrastructure.dependencies import (
    get_employee_salary_service,
    get_salary_service,
    get_table_params,
    require_password_confirmation,
)

router = APIRouter(prefix="/salaries", tags=["Salaries"])


class SalaryStatusUpdate(BaseModel):
    status: SalaryStatus


# ── Labourer wages ──────────────────────────────────────────────────


@router.get("/labour", response_model=TablePageResponse[LabourSalaryResponse])
async def list_labour_salaries(
    project_id: str | None = Query(None),
    salary_status: SalaryStatus | None = Query(None, alias="status"),
    params: TableParams = Depends(get_table_params),
    service: SalaryService = Depends(get_salary_service),
) -> TablePageResponse[LabourSalaryResponse]:
    page = await service.list_salaries(params, project_id=project_id, status=salary_status)
    return TablePageResponse[LabourSalaryResponse].model_validate(page, from_attributes=True)


@router.get("/labour/paid-total", response_model=PaidSalaryTotalResponse)
async def paid_total(
    project_id: str = Query(..., min_length=1),
    service: SalaryService = Depends(get_salary_service),
) -> PaidSalaryTotalResponse:
    """Sum of paid wages charged to one project."""
    total = await service.paid_total_by_project(project_id)
    return PaidSalaryTotalResponse(
        project_id=project_id, total_paid=total.total_paid, count=total.count
    )


@router.post(
    "/labour", response_model=LabourSalaryResponse, status_code=status.HTTP_201_CREATED
)
async def create_labour_salary(
    data: LabourSalaryCreate,
    service: SalaryService = Depends(get_salary_service),
) -> LabourSalaryResponse:
    salary = await service.create_salary(data)
    return LabourSalaryResponse.model_validate(salary, from_attributes=True)


@router.put(
    "/labour/{salary_id}",
    response_model=LabourSalaryResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_labour_salary(
    salary_id: str,
    data: LabourSalaryUpdate,
    service: SalaryService = Depends(get_salary_service),
) -> LabourSalaryResponse:
    salary = await service.update_salary(salary_id, data)
    return LabourSalaryResponse.model_validate(salary, from_attributes=True)


@router.patch(
    "/labour/{salary_id}/status",
    response_model=LabourSalaryResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_labour_salary_status(
    salary_id: str,
    data: SalaryStatusUpdate,
    service: SalaryService = Depends(get_salary_service),
) -> LabourSalaryResponse:
    """Mark a wage payment pending, paid or cancelled."""
    salary = await service.update_status(salary_id, data.status)
    return LabourSalaryResponse.model_validate(salary, from_attributes=True)


@router.delete(
    "/labour/{salary_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_labour_salary(
    salary_id: str,
    service: SalaryService = Depends(get_salary_service),
) -> None:
    await service.delete_salary(salary_id)


# ── Staff salaries ──────────────────────────────────────────────────


@router.get("/employees", response_model=TablePageResponse[EmployeeSalaryResponse])
async def list_employee_salaries(
    month: int | None = Query(None, ge=1, le=12),
    year: int | None = Query(None, ge=2000, le=2100),
    salary_status: Literal["paid", "not"] | None = Query(None, alias="status"),
    params: TableParams = Depends(get_table_params),
    service: EmployeeSalaryService = Depends(get_employee_salary_service),
) -> TablePageResponse[EmployeeSalaryResponse]:
    page = await service.list(
        params,
        upstream_filters={"month": month, "year": year, "status": salary_status},
    )
    return TablePageResponse[EmployeeSalaryResponse].model_validate(page, from_attributes=True)


@router.get("/employees/{salary_id}", response_model=EmployeeSalaryResponse)
async def get_employee_salary(
    salary_id: str,
    service: EmployeeSalaryService = Depends(get_employee_salary_service),
) -> EmployeeSalaryResponse:
    salary = await service.get(salary_id)
    return EmployeeSalaryResponse.model_validate(salary, from_attributes=True)


@router.post(
    "/employees", response_model=EmployeeSalaryResponse, status_code=status.HTTP_201_CREATED
)
async def create_employee_salary(
    data: EmployeeSalaryCreate,
    service: EmployeeSalaryService = Depends(get_employee_salary_service),
) -> EmployeeSalaryResponse:
    salary = await service.create(data)
    return EmployeeSalaryResponse.model_validate(salary, from_attributes=True)


@router.put(
    "/employees/{salary_id}",
    response_model=EmployeeSalaryResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_employee_salary(
    salary_id: str,
    data: EmployeeSalaryUpdate,
    service: EmployeeSalaryService = Depends(get_employee_salary_service),
) -> EmployeeSalaryResponse:
    salary = await service.update(salary_id, data)
    return EmployeeSalaryResponse.model_validate(salary, from_attributes=True)


@router.delete(
    "/employees/{salary_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_employee_salary(
    salary_id: str,
    service: EmployeeSalaryService = Depends(get_employee_salary_service),
) -> None:
    await service.delete(salary_id)
