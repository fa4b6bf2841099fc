from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...common.datetime_utils import to_ist
from ...core.enums import AttendanceStatus
from .base import StatusDecision, StatusStrategy


class LateStrategy(StatusStrategy):
    """First check-in after the late threshold."""

    def __init__(self, late_threshold: str):
        self._late_threshold = late_threshold

    def decide(self, *, work_minutes: int, first_check_in: Optional[datetime]) -> StatusDecision:
        arrived = to_ist(first_check_in).strftime("%H:%M") if first_check_in else "-"
        return StatusDecision(
            status=AttendanceStatus.LATE,
            note=f"Arrived {arrived} (threshold {self._late_threshold})",
        )
