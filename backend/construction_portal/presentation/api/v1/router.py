"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from construction_portal.presentation.api.v1.endpoints.health import router as health_router
from construction_portal.presentation.api.v1.endpoints.auth import router as auth_router
from construction_portal.presentation.api.v1.endpoints.labourers import router as labourers_router
from construction_portal.presentation.api.v1.endpoints.attendance import router as attendance_router
from construction_portal.presentation.api.v1.endpoints.salaries import router as salaries_router
from construction_portal.presentation.api.v1.endpoints.materials import router as materials_router
from construction_portal.presentation.api.v1.endpoints.suppliers import router as suppliers_router
from construction_portal.presentation.api.v1.endpoints.subcontractors import (
    router as subcontractors_router,
)
from construction_portal.presentation.api.v1.endpoints.customers import router as customers_router
from construction_portal.presentation.api.v1.endpoints.transactions import (
    router as transactions_router,
)
from construction_portal.presentation.api.v1.endpoints.expenses import router as expenses_router
from construction_portal.presentation.api.v1.endpoints.projects import router as projects_router
from construction_portal.presentation.api.v1.endpoints.reports import router as reports_router
from construction_portal.presentation.api.v1.endpoints.schedules import router as schedules_router
from construction_portal.presentation.api.v1.endpoints.employees import router as employees_router
from construction_portal.presentation.api.v1.endpoints.material_catalog import (
    router as material_catalog_router,
)
from construction_portal.presentation.api.v1.endpoints.dashboard import router as dashboard_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(labourers_router)
router.include_router(attendance_router)
router.include_router(salaries_router)
router.include_router(materials_router)
router.include_router(suppliers_router)
router.include_router(subcontractors_router)
router.include_router(customers_router)
router.include_router(transactions_router)
router.include_router(expenses_router)
router.include_router(projects_router)
router.include_router(reports_router)
router.include_router(schedules_router)
router.include_router(employees_router)
router.include_router(material_catalog_router)
router.include_router(dashboard_router)
