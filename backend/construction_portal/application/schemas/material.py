"""Pydantic DTOs for site materials."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from construction_portal.application.schemas.common import ApiPayload
from construction_portal.domain.entities import MaterialStatus

MaterialName = Literal["Cement", "Sand", "Concrete Stones", "Concrete Wire", "Other"]
AmountType = Literal["Packs", "Cubes", "Pieces", "Kg", "Tons", "Other"]


class SiteMaterialCreate(ApiPayload):
    project_id: str = Field(..., min_length=1)
    material: MaterialName
    supplier: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., ge=0)
    amount_type: AmountType
    unit_cost: float = Field(0, ge=0)
    total_cost: float | None = Field(None, ge=0)
    received_date: datetime | None = None
    expected_date: datetime | None = None
    status: MaterialStatus = MaterialStatus.RECEIVED
    notes: str = Field("", max_length=500)

    def to_api(self) -> dict:
        payload = super().to_api()
        if self.total_cost is None:
            payload["totalCost"] = round(self.amount * self.unit_cost, 2)
        return payload


class SiteMaterialUpdate(ApiPayload):
    material: MaterialName | None = None
    supplier: str | None = Field(None, min_length=1, max_length=100)
    amount: float | None = Field(None, ge=0)
    amount_type: AmountType | None = None
    unit_cost: float | None = Field(None, ge=0)
    total_cost: float | None = Field(None, ge=0)
    received_date: datetime | None = None
    expected_date: datetime | None = None
    status: MaterialStatus | None = None
    notes: str | None = Field(None, max_length=500)


class SiteMaterialResponse(BaseModel):
    id: str | None
    project_id: str
    material: str
    supplier: str
    amount: float
    amount_type: str
    unit_cost: float
    total_cost: float
    received_date: datetime | None
    expected_date: datetime | None
    status: MaterialStatus
    notes: str

    model_config = {"from_attributes": True}
