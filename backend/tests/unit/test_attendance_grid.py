"""Unit tests for the monthly attendance grid."""

from datetime import datetime

import pytest

from construction_portal.domain.attendance_grid import (
    attendance_percentage,
    days_in_month,
    derive_status_label,
    is_counted_present,
    process_attendance_for_display,
    summarize_grid,
)
from construction_portal.domain.entities import (
    AttendanceRecord,
    AttendanceStatus,
    Labourer,
    ShiftType,
)


def _record(labourer_id, day, status, shift=ShiftType.DAY, hours=0.0, month=2):
    return AttendanceRecord(
        labourer_id=labourer_id,
        project_id="p1",
        date=datetime(2024, month, day),
        status=status,
        shift_type=shift,
        hours_worked=hours,
    )


def test_days_in_month_handles_leap_years_and_rejects_bad_months():
    assert days_in_month(2, 2024) == 29
    assert days_in_month(2, 2023) == 28
    with pytest.raises(ValueError):
        days_in_month(13, 2024)


@pytest.mark.parametrize(
    "status, shift, hours, label",
    [
        (AttendanceStatus.PRESENT, ShiftType.DAY, 8, "Full"),
        (AttendanceStatus.PRESENT, ShiftType.DAY, 5, "Day"),
        (AttendanceStatus.PRESENT, ShiftType.NIGHT, 10, "Night"),
        (AttendanceStatus.HALF_DAY, ShiftType.DAY, 4, "Day"),
        (AttendanceStatus.LATE, ShiftType.DAY, 0, "Day"),
        (AttendanceStatus.ABSENT, ShiftType.DAY, 0, "Absent"),
    ],
)
def test_derive_status_label(status, shift, hours, label):
    assert derive_status_label(_record("l1", 1, status, shift, hours)) == label


def test_grid_has_a_slot_per_day_and_skips_foreign_records():
    labourers = [
        Labourer(id="l1", name="Nimal", contact="", base_salary=0, labour_code="JHC/LAB/0001"),
        Labourer(id="l2", name="Kamal", contact="", base_salary=0),
    ]
    records = [
        _record("l1", 1, AttendanceStatus.PRESENT, hours=8),
        _record("l1", 2, AttendanceStatus.ABSENT),
        _record("l2", 29, AttendanceStatus.PRESENT, ShiftType.NIGHT),
        _record("ghost", 3, AttendanceStatus.PRESENT),
        _record("l1", 3, AttendanceStatus.PRESENT, month=3),
    ]

    rows = process_attendance_for_display(labourers, records, 2, 2024)

    assert [r.labourer_id for r in rows] == ["l1", "l2"]
    assert len(rows[0].attendance) == 29
    assert rows[0].attendance[:3] == ["Full", "Absent", None]
    assert rows[1].attendance[28] == "Night"
    assert summarize_grid(rows) == {"Full": 1, "Day": 0, "Night": 1, "Absent": 1}


def test_later_record_for_the_same_day_wins():
    labourers = [Labourer(id="l1", name="Nimal", contact="", base_salary=0)]
    records = [
        _record("l1", 5, AttendanceStatus.ABSENT),
        _record("l1", 5, AttendanceStatus.PRESENT, hours=9),
    ]
    rows = process_attendance_for_display(labourers, records, 2, 2024)
    assert rows[0].attendance[4] == "Full"


def test_attendance_percentage_and_present_statuses():
    assert attendance_percentage(2, 3) == 67
    assert attendance_percentage(0, 0) == 0
    assert is_counted_present("half-day")
    assert is_counted_present(AttendanceStatus.LATE)
    assert not is_counted_present("absent")


def test_rows_count_present_and_absent_days():
    labourers = [
        Labourer(id="l1", name="Nimal", contact="", base_salary=0),
        Labourer(id="l2", name="Kamal", contact="", base_salary=0),
    ]
    records = [
        _record("l1", 1, AttendanceStatus.PRESENT, hours=8),
        _record("l1", 2, AttendanceStatus.HALF_DAY),
        _record("l1", 3, AttendanceStatus.LATE),
        _record("l1", 4, AttendanceStatus.ABSENT),
        # overwritten by the next record for the same day
        _record("l1", 5, AttendanceStatus.ABSENT),
        _record("l1", 5, AttendanceStatus.PRESENT),
    ]

    nimal, kamal = process_attendance_for_display(labourers, records, 2, 2024)

    assert (nimal.total_present, nimal.total_absent, nimal.total_days) == (4, 1, 29)
    assert (kamal.total_present, kamal.total_absent, kamal.total_days) == (0, 0, 29)
