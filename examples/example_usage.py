"""Example: run the aggregation engine directly (no database).

A day with a lunch break and a late arrival, then a geofence check.
"""

from datetime import datetime

from src.attendease.attendease.attendance.classifier import classify
from src.attendease.attendease.attendance.intervals import reconstruct
from src.attendease.attendease.attendance.model import AttendanceEvent
from src.attendease.attendease.common.datetime_utils import IST, format_minutes
from src.attendease.attendease.core.enums import SessionType
from src.attendease.attendease.geofence.geo import admit
from src.attendease.attendease.geofence.model import GeoFence


def main():
    day = [
        (SessionType.CHECK_IN, datetime(2026, 2, 2, 9, 42, tzinfo=IST)),
        (SessionType.CHECK_OUT, datetime(2026, 2, 2, 13, 10, tzinfo=IST)),
        (SessionType.CHECK_IN, datetime(2026, 2, 2, 13, 55, tzinfo=IST)),
        (SessionType.CHECK_OUT, datetime(2026, 2, 2, 19, 5, tzinfo=IST)),
    ]
    events = [AttendanceEvent(kind=k, timestamp=ts, latitude=12.9716, longitude=77.5946) for k, ts in day]

    totals = reconstruct(events, now=datetime(2026, 2, 2, 23, 0, tzinfo=IST))
    result = classify(totals.work_minutes, totals.first_check_in)
    print(
        f"work={format_minutes(totals.work_minutes)} break={format_minutes(totals.break_minutes)} "
        f"status={result.status.value} overtime={result.overtime_minutes}m"
    )

    office = GeoFence(fence_id=1, name="Main Office", latitude=12.9716, longitude=77.5946, radius_m=500)
    print(admit(12.9352, 77.6245, [office]))


if __name__ == "__main__":
    main()
