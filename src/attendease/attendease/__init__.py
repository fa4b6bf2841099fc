"""AttendEase attendance package.

Feature modules (attendance, geofence, sync, reports, ...) follow a
service/repository layering. The session aggregation engine itself
(``attendance.intervals``, ``attendance.classifier``, ``geofence.geo``) is pure.
"""
