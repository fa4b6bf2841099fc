from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus, SessionType


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one check-in or check-out action."""

    kind: SessionType
    timestamp: datetime
    latitude: float
    longitude: float
    user_id: Optional[int] = None
    session_id: Optional[int] = None
    device_info: Optional[str] = None


@dataclass(frozen=True)
class IntervalTotals:
    """Output of interval reconstruction for one subject/day."""

    work_minutes: int
    break_minutes: int
    first_check_in: Optional[datetime]
    last_check_out: Optional[datetime]
    session_count: int
    is_open: bool = False


@dataclass(frozen=True)
class DaySummary:
    """Derived daily summary, replaced wholesale on every recompute."""

    user_id: int
    work_date: date
    work_minutes: int
    break_minutes: int
    overtime_minutes: int
    first_check_in: Optional[datetime]
    last_check_out: Optional[datetime]
    session_count: int
    status: AttendanceStatus
