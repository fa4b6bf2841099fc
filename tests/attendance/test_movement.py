from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.attendease.attendease.attendance import movement
from src.attendease.attendease.attendance.model import AttendanceEvent
from src.attendease.attendease.attendance.movement import (
    ALERT_DUE,
    ALERTS_DISABLED,
    ALREADY_ALERTED,
    NO_CHECKIN,
    NOT_CHECKED_IN,
    OK,
    AlertCooldown,
    MovementMonitor,
)
from src.attendease.attendease.common.datetime_utils import IST
from src.attendease.attendease.core.constants import REGULARIZED_DEVICE
from src.attendease.attendease.core.enums import SessionType
from src.attendease.attendease.settings.model import AttendancePolicy

CHECKIN_AT = (12.9716, 77.5946)


class FakeSessions:
    def __init__(self, events):
        self.events = events

    def list_for_user_between(self, user_id, start, end):
        return [e for e in self.events if e.user_id == user_id and start <= e.timestamp <= end]


def ist(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 3, 4, hour, minute, tzinfo=IST)


def ev(kind, ts, lat=CHECKIN_AT[0], lng=CHECKIN_AT[1]):
    return AttendanceEvent(kind=kind, timestamp=ts, latitude=lat, longitude=lng, user_id=1)


def north_of_checkin(meters: float) -> tuple[float, float]:
    return CHECKIN_AT[0] + meters / 111_194.93, CHECKIN_AT[1]


@pytest.fixture
def checked_in():
    return FakeSessions([ev(SessionType.CHECK_IN, ist(9))])


def test_no_checkin_today():
    monitor = MovementMonitor(FakeSessions([]))

    assert monitor.ping(1, *CHECKIN_AT, now=ist(10)).status == NO_CHECKIN


def test_checked_out_user_is_not_tracked():
    sessions = FakeSessions([ev(SessionType.CHECK_IN, ist(9)), ev(SessionType.CHECK_OUT, ist(12))])

    assert MovementMonitor(sessions).ping(1, *CHECKIN_AT, now=ist(13)).status == NOT_CHECKED_IN


def test_within_threshold_reports_distance(checked_in):
    result = MovementMonitor(checked_in).ping(1, *north_of_checkin(300), now=ist(10))

    assert result.status == OK
    assert result.distance_m == 300


def test_beyond_threshold_alerts_once_per_window(checked_in):
    cooldown = AlertCooldown()
    monitor = MovementMonitor(checked_in, cooldown=cooldown)
    far = north_of_checkin(800)

    first = monitor.ping(1, *far, now=ist(10))
    second = monitor.ping(1, *far, now=ist(10, 30))
    third = monitor.ping(1, *far, now=ist(11, 1))

    assert first.status == ALERT_DUE
    assert first.distance_m == 800
    assert second.status == ALREADY_ALERTED
    assert third.status == ALERT_DUE


def test_distance_is_measured_from_first_checkin():
    sessions = FakeSessions(
        [
            ev(SessionType.CHECK_IN, ist(9)),
            ev(SessionType.CHECK_OUT, ist(12)),
            ev(SessionType.CHECK_IN, ist(13), *north_of_checkin(2000)),
        ]
    )

    result = MovementMonitor(sessions).ping(1, *north_of_checkin(2000), now=ist(14))

    assert result.status == ALERT_DUE
    assert result.distance_m == 2000


def test_alerts_can_be_disabled(checked_in):
    policy = AttendancePolicy(movement_alert_enabled=False)
    monitor = MovementMonitor(checked_in, policy_provider=lambda: policy)

    assert monitor.ping(1, *north_of_checkin(5000), now=ist(10)).status == ALERTS_DISABLED


def test_threshold_comes_from_policy(checked_in):
    policy = AttendancePolicy(movement_alert_distance_m=1000)
    monitor = MovementMonitor(checked_in, policy_provider=lambda: policy)

    assert monitor.ping(1, *north_of_checkin(800), now=ist(10)).status == OK


def test_cooldown_purges_expired_entries():
    cooldown = AlertCooldown(window=timedelta(minutes=10))
    cooldown.mark(1, ist(9))

    cooldown.purge(ist(9, 30))

    assert cooldown.is_cooling_down(1, ist(9, 30)) is False


def test_ping_distance_rounds_half_meter_up(checked_in, monkeypatch):
    monkeypatch.setattr(movement, "haversine_distance", lambda *args: 120.5)

    result = MovementMonitor(checked_in).ping(1, *CHECKIN_AT, now=ist(10))

    assert result.status == OK
    assert result.distance_m == 121


def test_regularized_checkin_is_not_used_as_anchor():
    regularized = AttendanceEvent(
        kind=SessionType.CHECK_IN, timestamp=ist(9), latitude=0.0, longitude=0.0, user_id=1, device_info=REGULARIZED_DEVICE
    )
    sessions = FakeSessions([regularized, ev(SessionType.CHECK_OUT, ist(12)), ev(SessionType.CHECK_IN, ist(13))])

    result = MovementMonitor(sessions).ping(1, *north_of_checkin(100), now=ist(14))

    assert result.status == OK
    assert result.distance_m == 100
