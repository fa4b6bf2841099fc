from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from .base import StatusDecision, StatusStrategy


class NormalStrategy(StatusStrategy):
    """On-time arrival, or no arrival to judge."""

    def decide(self, *, work_minutes: int, first_check_in: Optional[datetime]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)
