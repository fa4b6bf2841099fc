"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STANDARD_WORK_HOURS = 8
LATE_THRESHOLD = "09:30"
HALF_DAY_MINUTES = 240
DEFAULT_GEOFENCE_RADIUS = 200
EARTH_RADIUS_M = 6_371_000

MOVEMENT_ALERT_DISTANCE = 500
MOVEMENT_ALERT_COOLDOWN_MINUTES = 60

# device_info of sessions inserted by an approved regularization; they carry no real location.
REGULARIZED_DEVICE = "Regularized"
