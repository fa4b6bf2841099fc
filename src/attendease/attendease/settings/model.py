from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import (
    DEFAULT_GEOFENCE_RADIUS,
    HALF_DAY_MINUTES,
    LATE_THRESHOLD,
    MOVEMENT_ALERT_COOLDOWN_MINUTES,
    MOVEMENT_ALERT_DISTANCE,
    STANDARD_WORK_HOURS,
)


@dataclass(frozen=True)
class AttendancePolicy:
    """Runtime-tunable attendance rules."""

    standard_work_minutes: int = STANDARD_WORK_HOURS * 60
    late_threshold: str = LATE_THRESHOLD
    half_day_minutes: int = HALF_DAY_MINUTES
    default_geofence_radius_m: float = DEFAULT_GEOFENCE_RADIUS
    movement_alert_enabled: bool = True
    movement_alert_distance_m: int = MOVEMENT_ALERT_DISTANCE
    movement_alert_cooldown_minutes: int = MOVEMENT_ALERT_COOLDOWN_MINUTES
