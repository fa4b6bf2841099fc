"""Reconstruct work and break intervals from a day's check-in/out events."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import ensure_aware, whole_minutes
from ..core.enums import SessionType
from ..core.exceptions import InvalidSessionSequenceError
from .model import AttendanceEvent, IntervalTotals

logger = logging.getLogger(__name__)


def reconstruct(events: Iterable[AttendanceEvent], now: datetime, *, strict: bool = False) -> IntervalTotals:
    """Pair CHECK_IN -> CHECK_OUT as work and CHECK_OUT -> CHECK_IN as break.

    A check-in that is still open at the end accrues work up to ``now``, so
    the result is live while the subject is checked in. With ``strict`` an
    orphan check-out or a repeated check-in raises instead of being tolerated.
    """

    # sorted() is stable: equal timestamps keep their input order.
    ordered = sorted(events, key=lambda e: ensure_aware(e.timestamp))

    work_minutes = 0
    break_minutes = 0
    open_check_in: Optional[datetime] = None
    open_check_out: Optional[datetime] = None
    first_check_in: Optional[datetime] = None
    last_check_out: Optional[datetime] = None

    for event in ordered:
        ts = ensure_aware(event.timestamp)
        if event.kind == SessionType.CHECK_IN:
            if first_check_in is None:
                first_check_in = ts
            if open_check_out is not None:
                break_minutes += whole_minutes(open_check_out, ts)
            elif open_check_in is not None:
                if strict:
                    raise InvalidSessionSequenceError(f"Check-in at {ts.isoformat()} while already checked in")
                logger.warning("Repeated check-in at %s replaces open check-in at %s", ts, open_check_in)
            open_check_in = ts
            open_check_out = None
        else:
            last_check_out = ts
            if open_check_in is None:
                if strict:
                    raise InvalidSessionSequenceError(f"Check-out at {ts.isoformat()} without a check-in")
                logger.warning("Dropping check-out at %s without an open check-in", ts)
                continue
            work_minutes += whole_minutes(open_check_in, ts)
            open_check_out = ts
            open_check_in = None

    if open_check_in is not None:
        work_minutes += whole_minutes(open_check_in, ensure_aware(now))

    return IntervalTotals(
        work_minutes=work_minutes,
        break_minutes=break_minutes,
        first_check_in=first_check_in,
        last_check_out=last_check_out,
        session_count=len(ordered),
        is_open=open_check_in is not None,
    )
