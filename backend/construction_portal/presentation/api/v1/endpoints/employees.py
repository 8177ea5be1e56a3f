"""Staff account endpoints — supervisors browse, managers hire and remove."""

from fastapi import APIRouter, Depends, Query, status

from construction_portal.application.schemas import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    TablePageResponse,
    TableParams,
)
from construction_portal.application.services import EmployeeService
from construction_portal.domain.entities import Department, LoginSession
from construction_portal.infrastructure.dependencies import (
    get_employee_service,
    get_table_params,
    require_password_confirmation,
    require_roles,
)

router = APIRouter(prefix="/employees", tags=["Employees"])

_staff_viewers = require_roles("supervisor", "manager")
_managers = require_roles("manager")


@router.get(
    "",
    response_model=TablePageResponse[EmployeeResponse],
    dependencies=[Depends(_staff_viewers)],
)
async def list_employees(
    role: str | None = Query(None),
    department: Department | None = Query(None),
    params: TableParams = Depends(get_table_params),
    service: EmployeeService = Depends(get_employee_service),
) -> TablePageResponse[EmployeeResponse]:
    page = await service.list(params, filters={"role": role, "department": department})
    return TablePageResponse[EmployeeResponse].model_validate(page, from_attributes=True)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    employee = await service.get(employee_id)
    return EmployeeResponse.model_validate(employee, from_attributes=True)


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(_managers)],
)
async def create_employee(
    data: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    employee = await service.create(data)
    return EmployeeResponse.model_validate(employee, from_attributes=True)


@router.put(
    "/{employee_id}",
    response_model=EmployeeResponse,
    dependencies=[Depends(require_password_confirmation)],
)
async def update_employee(
    employee_id: str,
    data: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    employee = await service.update(employee_id, data)
    return EmployeeResponse.model_validate(employee, from_attributes=True)


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_password_confirmation)],
)
async def delete_employee(
    employee_id: str,
    login: LoginSession = Depends(_managers),
    service: EmployeeService = Depends(get_employee_service),
) -> None:
    await service.delete(employee_id, requested_by=login.user.id)
