from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

from ..settings.model import AttendancePolicy
from .classifier import classify
from .intervals import reconstruct
from .model import AttendanceEvent, DaySummary


def build_summary(
    user_id: int,
    work_date: date,
    events: Iterable[AttendanceEvent],
    *,
    now: datetime,
    policy: Optional[AttendancePolicy] = None,
) -> Optional[DaySummary]:
    """Recompute a full day summary from its events.

    Returns ``None`` for a day without events; ABSENT and ON_LEAVE are
    decided elsewhere.
    """

    policy = policy or AttendancePolicy()
    totals = reconstruct(list(events), now)
    if totals.session_count == 0:
        return None

    result = classify(
        totals.work_minutes,
        totals.first_check_in,
        late_threshold=policy.late_threshold,
        standard_work_minutes=policy.standard_work_minutes,
        half_day_minutes=policy.half_day_minutes,
    )
    return DaySummary(
        user_id=user_id,
        work_date=work_date,
        work_minutes=totals.work_minutes,
        break_minutes=totals.break_minutes,
        overtime_minutes=result.overtime_minutes,
        first_check_in=totals.first_check_in,
        last_check_out=totals.last_check_out,
        session_count=totals.session_count,
        status=result.status,
    )
