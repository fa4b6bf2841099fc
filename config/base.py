"""Settings shared by every environment.

Attendance rules here are deployment defaults; administrators can override
them at runtime through the ``app_config`` table.
"""

import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendease"),
}

STANDARD_WORK_HOURS = float(os.getenv("STANDARD_WORK_HOURS", "8"))
LATE_THRESHOLD = os.getenv("LATE_THRESHOLD", "09:30")
HALF_DAY_MINUTES = int(os.getenv("HALF_DAY_MINUTES", "240"))
DEFAULT_GEOFENCE_RADIUS = float(os.getenv("DEFAULT_GEOFENCE_RADIUS", "200"))
MOVEMENT_ALERT_DISTANCE = int(os.getenv("MOVEMENT_ALERT_DISTANCE", "500"))
MOVEMENT_ALERT_COOLDOWN_MINUTES = int(os.getenv("MOVEMENT_ALERT_COOLDOWN_MINUTES", "60"))
