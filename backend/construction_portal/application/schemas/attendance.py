"""Pydantic DTOs for attendance records, bulk marking and the monthly grid."""

from datetime import date, datetime, time

from pydantic import BaseModel, Field

from construction_portal.application.schemas.common import ApiPayload
from construction_portal.domain.entities import AttendanceStatus, ShiftType


class AttendanceCreate(ApiPayload):
    labour: str = Field(..., min_length=1)
    project: str = Field(..., min_length=1)
    date: datetime
    status: AttendanceStatus = AttendanceStatus.ABSENT
    shift_type: ShiftType = ShiftType.DAY
    hours_worked: float = Field(0, ge=0, le=24)
    clock_in: datetime | None = None
    clock_out: datetime | None = None
    notes: str = Field("", max_length=500)


class AttendanceUpdate(ApiPayload):
    status: AttendanceStatus | None = None
    shift_type: ShiftType | None = None
    hours_worked: float | None = Field(None, ge=0, le=24)
    clock_in: datetime | None = None
    clock_out: datetime | None = None
    notes: str | None = Field(None, max_length=500)


class AttendanceMarkEntry(BaseModel):
    """One labourer's line on the daily marking sheet."""

    labour: str = Field(..., min_length=1)
    status: AttendanceStatus = AttendanceStatus.ABSENT
    clock_in: time | None = None
    clock_out: time | None = None
    notes: str = Field("", max_length=500)


class AttendanceMarkRequest(BaseModel):
    """A supervisor's marking sheet for one site and one day."""

    project: str = Field(..., min_length=1)
    date: date
    entries: list[AttendanceMarkEntry]


class AttendanceResponse(BaseModel):
    id: str | None
    labourer_id: str
    labourer_name: str | None
    project_id: str | None
    date: datetime
    status: AttendanceStatus
    shift_type: ShiftType
    hours_worked: float
    clock_in: datetime | None
    clock_out: datetime | None
    notes: str

    model_config = {"from_attributes": True}


class AttendanceMarkResponse(BaseModel):
    message: str
    saved: int
    attendance: list[AttendanceResponse]


class AttendanceRowResponse(BaseModel):
    labourer_id: str
    name: str
    labour_code: str | None
    attendance: list[str | None]
    total_present: int
    total_absent: int
    total_days: int

    model_config = {"from_attributes": True}


class AttendanceGridResponse(BaseModel):
    project_id: str
    month: int
    year: int
    days: int
    rows: list[AttendanceRowResponse]
    summary: dict[str, int]
    total_present: int
    total_absent: int
    attendance_rate: int


class SiteAttendancePercentageResponse(BaseModel):
    project_id: str
    project_name: str
    percentage: int
    present_count: int
    total_count: int

    model_config = {"from_attributes": True}
