"""Pydantic DTOs for the labour register."""

from datetime import datetime

from pydantic import BaseModel, Field

from construction_portal.application.schemas.common import ApiPayload
from construction_portal.domain.entities import LabourStatus, SkillLevel


class LabourerCreate(ApiPayload):
    """Schema for registering a new labourer on a project."""

    name: str = Field(..., min_length=1, max_length=100, examples=["Nimal Perera"])
    contact: str = Field(..., min_length=1, max_length=20, examples=["0771234567"])
    base_salary: float = Field(..., ge=0, examples=[3500])
    project: str = Field(..., min_length=1, description="Upstream project id")
    skill_level: SkillLevel = SkillLevel.NON_SKILLED
    status: LabourStatus = LabourStatus.ACTIVE


class LabourerUpdate(ApiPayload):
    """Schema for updating a labourer — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=100)
    contact: str | None = Field(None, min_length=1, max_length=20)
    base_salary: float | None = Field(None, ge=0)
    project: str | None = None
    skill_level: SkillLevel | None = None
    status: LabourStatus | None = None


class LabourerResponse(BaseModel):
    id: str
    name: str
    contact: str
    base_salary: float
    project_id: str | None
    labour_code: str | None
    skill_level: SkillLevel
    status: LabourStatus
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
