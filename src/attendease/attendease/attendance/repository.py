from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import SessionType
from .model import AttendanceEvent, DaySummary


class SessionRepository(Protocol):
    def list_for_user_between(self, user_id: int, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        """Events with ``start <= timestamp <= end``, oldest first."""
        raise NotImplementedError

    def create(
        self,
        *,
        user_id: int,
        session_type: SessionType,
        timestamp: datetime,
        latitude: float,
        longitude: float,
        device_info: Optional[str] = None,
    ) -> AttendanceEvent:
        raise NotImplementedError


class DailySummaryRepository(Protocol):
    def get(self, user_id: int, work_date: date) -> Optional[DaySummary]:
        raise NotImplementedError

    def replace(self, summary: DaySummary) -> None:
        """Insert or overwrite the row keyed by (user_id, work_date)."""
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[DaySummary]:
        raise NotImplementedError
