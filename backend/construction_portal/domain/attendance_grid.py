"""Monthly attendance grid — lays daily records out per labourer, per day.

Pure functions over already-fetched labourers and attendance records; no I/O.
"""

import calendar
from collections import Counter
from collections.abc import Iterable

from construction_portal.domain.entities import (
    AttendanceRecord,
    AttendanceStatus,
    Labourer,
    LabourerAttendanceRow,
    ShiftType,
)

FULL = "Full"
DAY = "Day"
NIGHT = "Night"
ABSENT = "Absent"

DISPLAY_LABELS = (FULL, DAY, NIGHT, ABSENT)

FULL_SHIFT_HOURS = 8


def days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` (1-12) of ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return calendar.monthrange(year, month)[1]


def derive_status_label(record: AttendanceRecord) -> str:
    """Collapse the raw status/shift/hours of a record into one display label."""
    status = AttendanceStatus(record.status)
    if status == AttendanceStatus.PRESENT:
        if ShiftType(record.shift_type) == ShiftType.NIGHT:
            return NIGHT
        return FULL if (record.hours_worked or 0) >= FULL_SHIFT_HOURS else DAY
    if status in (AttendanceStatus.HALF_DAY, AttendanceStatus.LATE):
        return DAY
    return ABSENT


def process_attendance_for_display(
    labourers: Iterable[Labourer],
    records: Iterable[AttendanceRecord],
    month: int,
    year: int,
) -> list[LabourerAttendanceRow]:
    """Build one row per labourer with a slot for every day of the month.

    Records for unknown labourers or for another month are skipped. When two
    records fall on the same day the later one in ``records`` wins, and only
    that record counts towards the row's present/absent totals.
    """
    length = days_in_month(month, year)
    rows: dict[str, LabourerAttendanceRow] = {}
    for labourer in labourers:
        rows[labourer.id] = LabourerAttendanceRow(
            labourer_id=labourer.id,
            name=labourer.name,
            labour_code=labourer.labour_code,
            attendance=[None] * length,
            total_days=length,
        )

    statuses: dict[str, dict[int, AttendanceStatus]] = {key: {} for key in rows}
    for record in records:
        row = rows.get(record.labourer_id)
        if row is None:
            continue
        if record.date.month != month or record.date.year != year:
            continue
        row.attendance[record.date.day - 1] = derive_status_label(record)
        statuses[record.labourer_id][record.date.day] = AttendanceStatus(record.status)

    for labourer_id, row in rows.items():
        recorded = statuses[labourer_id].values()
        row.total_present = sum(1 for status in recorded if is_counted_present(status))
        row.total_absent = len(recorded) - row.total_present

    return list(rows.values())


def summarize_grid(rows: Iterable[LabourerAttendanceRow]) -> dict[str, int]:
    """Count each display label across the grid; empty days are not counted."""
    counts: Counter[str] = Counter()
    for row in rows:
        counts.update(label for label in row.attendance if label is not None)
    return {label: counts.get(label, 0) for label in DISPLAY_LABELS}


def attendance_percentage(present: int, total: int) -> int:
    """Rounded share of present days; 0 for an empty period."""
    if total <= 0:
        return 0
    return round(present / total * 100)


def is_counted_present(status: AttendanceStatus | str) -> bool:
    """Present, half-day and late all count as a day worked."""
    return AttendanceStatus(status) != AttendanceStatus.ABSENT
