"""Pydantic DTOs for the material catalog and dashboard figures."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from construction_portal.application.schemas.common import ApiPayload

CatalogMaterialName = Literal["Cement", "Sand", "Concrete Stones", "Concrete Wire"]
CatalogSupplier = Literal["Sandaruwan Hardware & Suppliers", "Mckinney", "Ronald Richard"]
StockUnit = Literal["packs", "cubes", "pieces"]


class _UnitPayload(ApiPayload):
    """Upstream accepts units in any case and stores them capitalised."""

    @field_validator("unit", mode="before", check_fields=False)
    @classmethod
    def _lower_unit(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value


class CatalogMaterialCreate(_UnitPayload):
    name: CatalogMaterialName
    supplier: CatalogSupplier
    quantity: float = Field(..., ge=0)
    unit: StockUnit
    received_date: datetime
    description: str | None = Field(None, max_length=500)


class CatalogMaterialUpdate(_UnitPayload):
    name: CatalogMaterialName | None = None
    supplier: CatalogSupplier | None = None
    quantity: float | None = Field(None, ge=0)
    unit: StockUnit | None = None
    received_date: datetime | None = None
    description: str | None = Field(None, max_length=500)


class StockUpdate(BaseModel):
    quantity: float = Field(..., ge=0)


class CatalogMaterialResponse(BaseModel):
    id: str
    material: str
    supplier: str
    amount: float
    amount_type: str
    received_date: datetime | None
    description: str
    updated_on: datetime | None

    model_config = {"from_attributes": True}


class DashboardStatsResponse(BaseModel):
    total_income: float
    total_expenses: float
    current_balance: float
    transaction_count: int

    model_config = {"from_attributes": True}
