"""Domain entities for daily attendance of labourers on a site."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class AttendanceStatus(str, Enum):
    """Raw attendance status as recorded by supervisors."""

    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half-day"
    LATE = "late"


class ShiftType(str, Enum):
    """Shift worked on the day."""

    DAY = "day"
    NIGHT = "night"
    FULL = "full"


@dataclass
class AttendanceRecord:
    """One labourer on one date. The upstream store keeps (labourer, date) unique."""

    labourer_id: str
    project_id: str | None
    date: datetime
    status: AttendanceStatus = AttendanceStatus.ABSENT
    shift_type: ShiftType = ShiftType.DAY
    hours_worked: float = 0.0
    id: str | None = None
    clock_in: datetime | None = None
    clock_out: datetime | None = None
    notes: str = ""
    labourer_name: str | None = None


@dataclass
class SiteAttendancePercentage:
    """Monthly attendance ratio for one site, as aggregated upstream."""

    project_id: str
    project_name: str
    percentage: int
    present_count: int
    total_count: int


@dataclass
class LabourerAttendanceRow:
    """A single labourer's month laid out day by day.

    ``attendance[d]`` holds the display label for day ``d + 1`` or ``None``
    when nothing was recorded that day.
    """

    labourer_id: str
    name: str
    labour_code: str | None
    attendance: list[str | None] = field(default_factory=list)
    total_present: int = 0
    total_absent: int = 0
    total_days: int = 0
