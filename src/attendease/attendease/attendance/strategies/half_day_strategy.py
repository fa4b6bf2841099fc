from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from .base import StatusDecision, StatusStrategy


class HalfDayStrategy(StatusStrategy):
    """Some work recorded, but less than the half-day minimum. Wins over LATE."""

    def __init__(self, half_day_minutes: int):
        self._half_day_minutes = half_day_minutes

    def decide(self, *, work_minutes: int, first_check_in: Optional[datetime]) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.HALF_DAY,
            note=f"Worked {work_minutes} of {self._half_day_minutes} minutes",
        )
