from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import ensure_aware, ist_date, ist_day_range, now_utc
from ..common.validators import require_coordinates
from ..core.constants import REGULARIZED_DEVICE
from ..core.enums import SessionType
from ..geofence.geo import haversine_distance, round_meters
from ..settings.model import AttendancePolicy
from .repository import SessionRepository

logger = logging.getLogger(__name__)

ALERTS_DISABLED = "alerts_disabled"
NO_CHECKIN = "no_checkin"
NOT_CHECKED_IN = "not_checked_in"
OK = "ok"
ALREADY_ALERTED = "already_alerted"
ALERT_DUE = "alert_due"


@dataclass(frozen=True)
class PingResult:
    status: str
    distance_m: Optional[int] = None


@dataclass
class AlertCooldown:
    """Last alert time per user, owned by whoever runs the monitor."""

    window: timedelta = timedelta(hours=1)
    _last_alert: dict[int, datetime] = field(default_factory=dict)

    def purge(self, now: datetime) -> None:
        expired = [uid for uid, ts in self._last_alert.items() if now - ts > self.window]
        for uid in expired:
            del self._last_alert[uid]

    def is_cooling_down(self, user_id: int, now: datetime) -> bool:
        last = self._last_alert.get(user_id)
        return last is not None and now - last < self.window

    def mark(self, user_id: int, now: datetime) -> None:
        self._last_alert[user_id] = now


class MovementMonitor:
    """Flags employees who wander away from where they checked in.

    Delivering the alert (e-mail, notification) is left to the caller; a
    result with status ``alert_due`` means one should be sent.
    """

    def __init__(
        self,
        sessions: SessionRepository,
        *,
        cooldown: Optional[AlertCooldown] = None,
        policy_provider: Optional[Callable[[], AttendancePolicy]] = None,
    ):
        self._sessions = sessions
        self._policy_provider = policy_provider or AttendancePolicy
        self._cooldown = cooldown or AlertCooldown()

    def ping(self, user_id: int, latitude, longitude, *, now: datetime | None = None) -> PingResult:
        lat, lng = require_coordinates(latitude, longitude)
        now = ensure_aware(now or now_utc())
        policy = self._policy_provider()

        if not policy.movement_alert_enabled:
            return PingResult(status=ALERTS_DISABLED)

        start, end = ist_day_range(ist_date(now))
        events = sorted(self._sessions.list_for_user_between(user_id, start, end), key=lambda e: ensure_aware(e.timestamp))

        first_check_in = next(
            (e for e in events if e.kind == SessionType.CHECK_IN and e.device_info != REGULARIZED_DEVICE), None
        )
        if first_check_in is None:
            return PingResult(status=NO_CHECKIN)
        if events[-1].kind != SessionType.CHECK_IN:
            return PingResult(status=NOT_CHECKED_IN)

        distance = round_meters(haversine_distance(first_check_in.latitude, first_check_in.longitude, lat, lng))
        if distance <= policy.movement_alert_distance_m:
            return PingResult(status=OK, distance_m=distance)

        self._cooldown.window = timedelta(minutes=policy.movement_alert_cooldown_minutes)
        self._cooldown.purge(now)
        if self._cooldown.is_cooling_down(user_id, now):
            return PingResult(status=ALREADY_ALERTED, distance_m=distance)

        self._cooldown.mark(user_id, now)
        logger.warning("User %s moved %sm from check-in location", user_id, distance)
        return PingResult(status=ALERT_DUE, distance_m=distance)
