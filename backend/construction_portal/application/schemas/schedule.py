"""Pydantic DTOs for work and payment schedules."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator

from construction_portal.application.schemas.common import ApiPayload
from construction_portal.application.schemas.project import TaskProgressResponse
from construction_portal.domain.entities import PaymentStatus, ScheduleSection, WorkStatus


def _rename(payload: dict[str, Any], **names: str) -> dict[str, Any]:
    for ours, theirs in names.items():
        if ours in payload:
            payload[theirs] = payload.pop(ours)
    return payload


class WorkScheduleCreate(ApiPayload):
    project_id: str = Field(..., min_length=1)
    section: ScheduleSection
    step: str = Field(..., min_length=1)
    title: str = Field(..., min_length=2, max_length=200)
    time_frame: str = Field(..., min_length=1)
    start_date: datetime
    end_date: datetime
    work_description: str = ""
    order: int = Field(0, ge=0)

    @model_validator(mode="after")
    def _end_after_start(self) -> "WorkScheduleCreate":
        if self.end_date < self.start_date:
            raise ValueError("End date must be after start date")
        return self

    def to_api(self) -> dict[str, Any]:
        return _rename(super().to_api(), projectId="project")


class WorkScheduleUpdate(ApiPayload):
    title: str | None = Field(None, min_length=2, max_length=200)
    time_frame: str | None = Field(None, min_length=1)
    start_date: datetime | None = None
    end_date: datetime | None = None
    work_description: str | None = None
    status: WorkStatus | None = None
    order: int | None = Field(None, ge=0)


class WorkStatusUpdate(BaseModel):
    status: WorkStatus


class WorkPlanStep(ApiPayload):
    """One row of the scheduler form; incomplete rows are skipped, not rejected."""

    step: str = ""
    title: str = ""
    time_frame: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    work_description: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(
            self.step and self.title and self.time_frame and self.start_date and self.end_date
        )


class WorkPlanRequest(ApiPayload):
    project_id: str = Field(..., min_length=1)
    sections: dict[ScheduleSection, list[WorkPlanStep]]


class PaymentScheduleCreate(ApiPayload):
    project_id: str = Field(..., min_length=1)
    work_schedule_id: str = Field(..., min_length=1)
    step: str = Field(..., min_length=1)
    title: str = Field(..., min_length=2, max_length=200)
    time_frame: str = Field(..., min_length=1)
    start_date: datetime
    end_date: datetime
    payment_amount: float = Field(..., ge=0)
    due_date: datetime
    order: int = Field(0, ge=0)

    def to_api(self) -> dict[str, Any]:
        return _rename(super().to_api(), projectId="project", workScheduleId="workSchedule")


class PaymentScheduleUpdate(ApiPayload):
    title: str | None = Field(None, min_length=2, max_length=200)
    time_frame: str | None = Field(None, min_length=1)
    payment_amount: float | None = Field(None, ge=0)
    payment_status: PaymentStatus | None = None
    due_date: datetime | None = None
    order: int | None = Field(None, ge=0)


class PaymentPlanStep(ApiPayload):
    """An instalment row, tied to the work step with the same ``step``."""

    step: str = ""
    title: str = ""
    time_frame: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    payment: float | None = Field(None, gt=0)

    @property
    def is_complete(self) -> bool:
        return bool(
            self.step
            and self.title
            and self.time_frame
            and self.start_date
            and self.end_date
            and self.payment
        )


class PaymentPlanRequest(ApiPayload):
    project_id: str = Field(..., min_length=1)
    steps: list[PaymentPlanStep]


class WorkScheduleResponse(BaseModel):
    id: str
    project_id: str
    section: str
    step: str
    title: str
    status: WorkStatus
    start_date: datetime | None
    end_date: datetime | None
    time_frame: str
    work_description: str
    order: int

    model_config = {"from_attributes": True}


class PaymentScheduleResponse(BaseModel):
    id: str
    project_id: str
    step: str
    payment_amount: float
    work_schedule_id: str | None
    section: str | None
    title: str
    payment_status: PaymentStatus
    due_date: datetime | None
    time_frame: str
    start_date: datetime | None
    end_date: datetime | None
    order: int

    model_config = {"from_attributes": True}


class WorkStatusResponse(BaseModel):
    """The updated step and the site's task progress after the change."""

    schedule: WorkScheduleResponse
    task_progress: TaskProgressResponse

    model_config = {"from_attributes": True}
