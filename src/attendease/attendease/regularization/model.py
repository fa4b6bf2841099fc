from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import RegularizationType, RequestStatus


@dataclass(frozen=True)
class Regularization:
    """An employee's request to correct a day's attendance record."""

    request_id: int
    user_id: int
    work_date: date
    reg_type: RegularizationType
    reason: str
    status: RequestStatus
    requested_time: Optional[datetime] = None
    created_at: Optional[datetime] = None
    reviewer_id: Optional[int] = None
    review_note: Optional[str] = None
    reviewed_at: Optional[datetime] = None
