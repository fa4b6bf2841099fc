from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import ensure_aware, ist_date, ist_day_range, now_utc
from ..common.validators import require_coordinates
from ..core.enums import SessionType
from ..core.exceptions import DuplicateSessionError, OutsideGeofenceError, ValidationError
from ..geofence.geo import admit
from ..geofence.repository import GeoFenceRepository
from ..settings.model import AttendancePolicy
from .model import AttendanceEvent, DaySummary
from .repository import DailySummaryRepository, SessionRepository
from .summary import build_summary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordResult:
    event: AttendanceEvent
    summary: DaySummary


def parse_session_type(value) -> SessionType:
    if isinstance(value, SessionType):
        return value
    try:
        return SessionType(str(value))
    except ValueError:
        raise ValidationError("Invalid session type")


class AttendanceService:
    def __init__(
        self,
        sessions: SessionRepository,
        summaries: DailySummaryRepository,
        geofences: GeoFenceRepository,
        *,
        policy_provider: Optional[Callable[[], AttendancePolicy]] = None,
    ):
        self._sessions = sessions
        self._summaries = summaries
        self._geofences = geofences
        self._policy_provider = policy_provider or AttendancePolicy

    def _day_events(self, user_id: int, work_date: date) -> Sequence[AttendanceEvent]:
        start, end = ist_day_range(work_date)
        return self._sessions.list_for_user_between(user_id, start, end)

    def record_session(
        self,
        user_id: int,
        session_type,
        latitude,
        longitude,
        *,
        now: datetime | None = None,
        device_info: str | None = None,
    ) -> RecordResult:
        kind = parse_session_type(session_type)
        lat, lng = require_coordinates(latitude, longitude)
        now = ensure_aware(now or now_utc())
        today = ist_date(now)

        existing = self._day_events(user_id, today)
        if existing:
            if existing[-1].kind == kind:
                if kind == SessionType.CHECK_IN:
                    raise DuplicateSessionError("Already checked in. Please check out first.")
                raise DuplicateSessionError("Already checked out. Please check in first.")
        elif kind == SessionType.CHECK_OUT:
            raise ValidationError("Cannot check out without checking in first")

        admission = admit(lat, lng, self._geofences.list_active())
        if not admission.allowed:
            logger.warning(
                "Rejected %s for user %s: %sm from nearest geofence", kind.value, user_id, admission.nearest_distance_m
            )
            raise OutsideGeofenceError(admission.nearest_distance_m)

        event = self._sessions.create(
            user_id=user_id,
            session_type=kind,
            timestamp=now,
            latitude=lat,
            longitude=lng,
            device_info=device_info or None,
        )
        logger.info("Recorded %s for user %s at %s", kind.value, user_id, now.isoformat())

        summary = build_summary(user_id, today, [*existing, event], now=now, policy=self._policy_provider())
        self._summaries.replace(summary)
        return RecordResult(event=event, summary=summary)

    def recompute_day(self, user_id: int, work_date: date, *, now: datetime | None = None) -> Optional[DaySummary]:
        """Rebuild the stored summary of one day from every recorded event."""
        now = ensure_aware(now or now_utc())
        summary = build_summary(
            user_id, work_date, self._day_events(user_id, work_date), now=now, policy=self._policy_provider()
        )
        if summary is not None:
            self._summaries.replace(summary)
            logger.debug("Replaced summary for user %s on %s: %s", user_id, work_date, summary.status.value)
        return summary

    def get_sessions(self, user_id: int, work_date: date) -> Sequence[AttendanceEvent]:
        return self._day_events(user_id, work_date)

    def get_summary(self, user_id: int, work_date: date) -> Optional[DaySummary]:
        return self._summaries.get(user_id, work_date)
