from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import HALF_DAY_MINUTES, LATE_THRESHOLD, STANDARD_WORK_HOURS
from ..core.enums import AttendanceStatus
from .factory import StatusStrategyFactory


@dataclass(frozen=True)
class Classification:
    status: AttendanceStatus
    overtime_minutes: int
    note: Optional[str] = None


def overtime_minutes(work_minutes: int, standard_work_minutes: int = STANDARD_WORK_HOURS * 60) -> int:
    return max(0, int(work_minutes) - int(standard_work_minutes))


def classify(
    work_minutes: int,
    first_check_in: Optional[datetime],
    *,
    late_threshold: str = LATE_THRESHOLD,
    standard_work_minutes: int = STANDARD_WORK_HOURS * 60,
    half_day_minutes: int = HALF_DAY_MINUTES,
) -> Classification:
    """Derive PRESENT/LATE/HALF_DAY and overtime for a day that has events."""

    factory = StatusStrategyFactory(late_threshold=late_threshold, half_day_minutes=half_day_minutes)
    strategy = factory.for_day(work_minutes=work_minutes, first_check_in=first_check_in)
    decision = strategy.decide(work_minutes=work_minutes, first_check_in=first_check_in)
    return Classification(
        status=decision.status,
        overtime_minutes=overtime_minutes(work_minutes, standard_work_minutes),
        note=decision.note,
    )
