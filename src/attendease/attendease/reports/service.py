from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..attendance.repository import DailySummaryRepository
from ..common.datetime_utils import format_ist_time, format_minutes
from ..core.enums import PRESENT_STATUSES, AttendanceStatus
from .repository import EmployeeDirectory

UNASSIGNED_ENTITY = "Unassigned Entity"
UNASSIGNED_LOCATION = "Unassigned Location"


@dataclass
class LocationGroup:
    location_name: str
    rows: list[dict] = field(default_factory=list)

    @property
    def present(self) -> int:
        return sum(1 for r in self.rows if r["is_present"])

    @property
    def absent(self) -> int:
        return len(self.rows) - self.present


@dataclass
class EntityGroup:
    entity_name: str
    locations: dict[str, LocationGroup] = field(default_factory=dict)


@dataclass(frozen=True)
class DailyReport:
    work_date: date
    total: int
    present: int
    absent: int
    late: int
    entities: list[EntityGroup]

    @property
    def present_pct(self) -> int:
        return round(self.present / self.total * 100) if self.total else 0


class DailyReportService:
    """Attendance overview of one day grouped by entity, then location."""

    def __init__(self, employees: EmployeeDirectory, summaries: DailySummaryRepository):
        self._employees = employees
        self._summaries = summaries

    def build(self, work_date: date) -> DailyReport:
        summaries = {s.user_id: s for s in self._summaries.list_for_date(work_date)}

        entity_map: dict[str, EntityGroup] = {}
        present = late = total = 0

        for emp in self._employees.list_reportable():
            total += 1
            s = summaries.get(emp.user_id)
            # No summary row means no check-in that day.
            status = s.status if s else AttendanceStatus.ABSENT
            is_present = status in PRESENT_STATUSES
            present += int(is_present)
            late += int(status == AttendanceStatus.LATE)

            row = {
                "user_id": emp.user_id,
                "full_name": emp.full_name,
                "employee_code": emp.employee_code or "",
                "dept_name": emp.dept_name or "-",
                "status": status.value,
                "is_present": is_present,
                "first_check_in": format_ist_time(s.first_check_in) if s and s.first_check_in else "-",
                "last_check_out": format_ist_time(s.last_check_out) if s and s.last_check_out else "-",
                "work_hours": format_minutes(s.work_minutes) if s else "-",
                "overtime_minutes": s.overtime_minutes if s else 0,
            }

            entity_name = emp.entity_name or UNASSIGNED_ENTITY
            location_name = emp.location_name or UNASSIGNED_LOCATION
            entity = entity_map.setdefault(entity_name, EntityGroup(entity_name))
            entity.locations.setdefault(location_name, LocationGroup(location_name)).rows.append(row)

        return DailyReport(
            work_date=work_date,
            total=total,
            present=present,
            absent=total - present,
            late=late,
            entities=list(entity_map.values()),
        )
