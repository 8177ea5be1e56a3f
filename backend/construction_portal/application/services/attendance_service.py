"""Application service for attendance marking and attendance views."""

import logging
from datetime import date, datetime, time, timezone
from typing import Any

from construction_portal.application.interfaces import AttendanceGateway, LabourerGateway
from construction_portal.application.schemas.attendance import (
    AttendanceMarkEntry,
    AttendanceMarkRequest,
)
from construction_portal.application.services.crud_service import CrudService
from construction_portal.domain.attendance_grid import (
    attendance_percentage,
    days_in_month,
    process_attendance_for_display,
    summarize_grid,
)
from construction_portal.domain.entities import (
    AttendanceRecord,
    AttendanceStatus,
    LabourerAttendanceRow,
    ShiftType,
    SiteAttendancePercentage,
)
from construction_portal.domain.exceptions import ValidationFailedError

logger = logging.getLogger(__name__)

NO_ATTENDANCE_MESSAGE = (
    "No attendance data to save. "
    "Please mark at least one labourer as present or add time/notes."
)


class MonthlyGrid:
    """A project's attendance laid out per labourer and day, plus label counts.

    ``attendance_rate`` is the share of labourer-days worked out of every
    labourer-day in the month.
    """

    def __init__(
        self,
        project_id: str,
        month: int,
        year: int,
        rows: list[LabourerAttendanceRow],
    ):
        self.project_id = project_id
        self.month = month
        self.year = year
        self.days = days_in_month(month, year)
        self.rows = rows
        self.summary = summarize_grid(rows)
        self.total_present = sum(row.total_present for row in rows)
        self.total_absent = sum(row.total_absent for row in rows)
        self.attendance_rate = attendance_percentage(self.total_present, len(rows) * self.days)


class AttendanceService(CrudService[AttendanceRecord]):
    entity_name = "Attendance record"
    search_fields = ("labourer_name", "notes")
    sortable_fields = ("date", "labourer_name", "status", "shift_type", "hours_worked")

    def __init__(self, gateway: AttendanceGateway, labourers: LabourerGateway):
        super().__init__(gateway)
        self._attendance = gateway
        self._labourers = labourers

    async def mark_bulk(self, request: AttendanceMarkRequest) -> list[AttendanceRecord]:
        """Save a day's marking sheet as one upsert per labourer.

        Lines left at "absent" with no times or notes are not sent.
        """
        payloads = [
            self._build_payload(request.project, request.date, entry)
            for entry in request.entries
            if _has_data(entry)
        ]
        if not payloads:
            raise ValidationFailedError(NO_ATTENDANCE_MESSAGE)

        saved = await self._attendance.bulk_upsert(payloads)
        logger.info(
            "Saved %d attendance line(s) for project %s on %s",
            len(payloads),
            request.project,
            request.date.isoformat(),
        )
        return saved

    @staticmethod
    def _build_payload(
        project_id: str, day: date, entry: AttendanceMarkEntry
    ) -> dict[str, Any]:
        clock_in = _at(day, entry.clock_in)
        clock_out = _at(day, entry.clock_out)
        payload: dict[str, Any] = {
            "labour": entry.labour,
            "project": project_id,
            "date": _at(day, time(0, 0)).isoformat(),
            "status": AttendanceStatus(entry.status).value,
            "clockIn": clock_in.isoformat() if clock_in else None,
            "clockOut": clock_out.isoformat() if clock_out else None,
            "notes": entry.notes or "",
            "shiftType": ShiftType.DAY.value,
        }
        if clock_in and clock_out and clock_out > clock_in:
            payload["hoursWorked"] = round((clock_out - clock_in).total_seconds() / 3600, 2)
        return payload

    async def site_percentages(self, month: int, year: int) -> list[SiteAttendancePercentage]:
        days_in_month(month, year)
        return await self._attendance.site_percentages(month, year)

    async def monthly_grid(self, project_id: str, month: int, year: int) -> MonthlyGrid:
        length = days_in_month(month, year)
        labourers = await self._labourers.list({"projectId": project_id})
        records = await self._attendance.list(
            {
                "projectId": project_id,
                "startDate": date(year, month, 1).isoformat(),
                "endDate": date(year, month, length).isoformat(),
            }
        )
        rows = process_attendance_for_display(labourers, records, month, year)
        return MonthlyGrid(project_id, month, year, rows)


def _has_data(entry: AttendanceMarkEntry) -> bool:
    return (
        AttendanceStatus(entry.status) != AttendanceStatus.ABSENT
        or entry.clock_in is not None
        or entry.clock_out is not None
        or bool(entry.notes)
    )


def _at(day: date, moment: time | None) -> datetime | None:
    if moment is None:
        return None
    return datetime.combine(day, moment, tzinfo=timezone.utc)
