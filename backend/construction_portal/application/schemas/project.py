"""Pydantic DTOs for projects and the site detail view."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from construction_portal.application.schemas.common import ApiPayload
from construction_portal.application.schemas.directory import (
    CustomerResponse,
    SubcontractorResponse,
)
from construction_portal.domain.entities import ProjectStatus


class ProjectCreate(ApiPayload):
    name: str = Field(..., min_length=1, max_length=100)
    supervisor: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=200)
    start_date: datetime
    end_date: datetime
    duration: int = Field(..., ge=1)
    estimated_cost: float = Field(..., ge=0)
    document_file_no: str = Field(..., min_length=1, max_length=50)
    customer_id: str | None = None
    status: ProjectStatus = ProjectStatus.PLANNING

    @model_validator(mode="after")
    def _end_after_start(self) -> "ProjectCreate":
        if self.end_date < self.start_date:
            raise ValueError("End date must be after start date")
        return self


class ProjectUpdate(ApiPayload):
    name: str | None = Field(None, min_length=1, max_length=100)
    supervisor: str | None = Field(None, min_length=1, max_length=100)
    location: str | None = Field(None, min_length=1, max_length=200)
    start_date: datetime | None = None
    end_date: datetime | None = None
    duration: int | None = Field(None, ge=1)
    estimated_cost: float | None = Field(None, ge=0)
    document_file_no: str | None = Field(None, min_length=1, max_length=50)
    customer_id: str | None = None
    status: ProjectStatus | None = None
    progress: int | None = Field(None, ge=0, le=100)

    @model_validator(mode="after")
    def _end_after_start(self) -> "ProjectUpdate":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("End date must be after start date")
        return self


class ProjectResponse(BaseModel):
    id: str
    name: str
    supervisor: str
    location: str
    start_date: datetime | None
    end_date: datetime | None
    duration: int | None
    estimated_cost: float | None
    document_file_no: str | None
    project_code: str | None
    customer_id: str | None
    status: ProjectStatus
    progress: int

    model_config = {"from_attributes": True}


class FinancialSummaryResponse(BaseModel):
    current_profit: float
    last_income: float
    last_income_date: datetime | None
    material_cost: float
    labourer_salary: float
    paid_labourer_salary: float
    subcontractor_expenses: float
    appointed_subcontractor_expenses: float
    total_expenses: float
    total_revenue: float

    model_config = {"from_attributes": True}


class TaskProgressResponse(BaseModel):
    total_amount: float
    completed_amount: float
    percent_complete: float

    model_config = {"from_attributes": True}


class SiteDetailResponse(BaseModel):
    """Everything the site detail page shows, in one payload."""

    project: ProjectResponse
    customer: CustomerResponse
    subcontractors: list[SubcontractorResponse]
    financial_summary: FinancialSummaryResponse
    task_progress: TaskProgressResponse
    duration_days: int
    estimated_cost_display: str

    model_config = {"from_attributes": True}
