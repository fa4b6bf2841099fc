"""Build an :class:`AttendancePolicy` from settings and admin overrides.

Settings modules (``config.development`` etc.) provide the deployment
defaults; rows in ``app_config`` edited by administrators win over them.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_hhmm
from ..core.exceptions import ValidationError
from .model import AttendancePolicy

# app_config keys understood by the policy
STANDARD_WORK_HOURS_KEY = "STANDARD_WORK_HOURS"
LATE_THRESHOLD_KEY = "LATE_THRESHOLD"
HALF_DAY_MINUTES_KEY = "HALF_DAY_MINUTES"
DEFAULT_GEOFENCE_RADIUS_KEY = "DEFAULT_GEOFENCE_RADIUS"
MOVEMENT_ALERT_ENABLED_KEY = "MOVEMENT_ALERT_ENABLED"
MOVEMENT_ALERT_DISTANCE_KEY = "MOVEMENT_ALERT_DISTANCE"
MOVEMENT_ALERT_COOLDOWN_KEY = "MOVEMENT_ALERT_COOLDOWN_MINUTES"

POLICY_KEYS = frozenset(
    {
        STANDARD_WORK_HOURS_KEY,
        LATE_THRESHOLD_KEY,
        HALF_DAY_MINUTES_KEY,
        DEFAULT_GEOFENCE_RADIUS_KEY,
        MOVEMENT_ALERT_ENABLED_KEY,
        MOVEMENT_ALERT_DISTANCE_KEY,
        MOVEMENT_ALERT_COOLDOWN_KEY,
    }
)


def _positive_number(key: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{key} must be a number")
    if number <= 0:
        raise ValidationError(f"{key} must be positive")
    return number


def _threshold(value: Any) -> str:
    text = str(value).strip()
    try:
        return parse_hhmm(text).strftime("%H:%M")
    except ValueError:
        raise ValidationError(f"{LATE_THRESHOLD_KEY} must be HH:MM")


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    # Alerts stay enabled unless explicitly switched off.
    return str(value).strip().lower() not in {"false", "0", "no", "off"}


def policy_from_settings(settings: Any = None, overrides: Optional[Mapping[str, Any]] = None) -> AttendancePolicy:
    values: dict[str, Any] = {}
    if settings is not None:
        for key in POLICY_KEYS:
            if hasattr(settings, key):
                values[key] = getattr(settings, key)
    for key, value in (overrides or {}).items():
        if key in POLICY_KEYS and value is not None and str(value).strip() != "":
            values[key] = value

    defaults = AttendancePolicy()
    standard_minutes = defaults.standard_work_minutes
    if STANDARD_WORK_HOURS_KEY in values:
        standard_minutes = int(round(_positive_number(STANDARD_WORK_HOURS_KEY, values[STANDARD_WORK_HOURS_KEY]) * 60))

    return AttendancePolicy(
        standard_work_minutes=standard_minutes,
        late_threshold=_threshold(values.get(LATE_THRESHOLD_KEY, defaults.late_threshold)),
        half_day_minutes=int(_positive_number(HALF_DAY_MINUTES_KEY, values.get(HALF_DAY_MINUTES_KEY, defaults.half_day_minutes))),
        default_geofence_radius_m=_positive_number(
            DEFAULT_GEOFENCE_RADIUS_KEY, values.get(DEFAULT_GEOFENCE_RADIUS_KEY, defaults.default_geofence_radius_m)
        ),
        movement_alert_enabled=_flag(values.get(MOVEMENT_ALERT_ENABLED_KEY, defaults.movement_alert_enabled)),
        movement_alert_distance_m=int(
            _positive_number(MOVEMENT_ALERT_DISTANCE_KEY, values.get(MOVEMENT_ALERT_DISTANCE_KEY, defaults.movement_alert_distance_m))
        ),
        movement_alert_cooldown_minutes=int(
            _positive_number(
                MOVEMENT_ALERT_COOLDOWN_KEY, values.get(MOVEMENT_ALERT_COOLDOWN_KEY, defaults.movement_alert_cooldown_minutes)
            )
        ),
    )
