from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles used for permission checks."""

    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    MANAGEMENT = "MANAGEMENT"
    EMPLOYEE = "EMPLOYEE"


class SessionType(str, Enum):
    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"


class AttendanceStatus(str, Enum):
    """Daily status stored on the summary row.

    The aggregation engine only derives PRESENT, LATE and HALF_DAY.
    """

    PRESENT = "PRESENT"
    LATE = "LATE"
    HALF_DAY = "HALF_DAY"
    ABSENT = "ABSENT"
    ON_LEAVE = "ON_LEAVE"


PRESENT_STATUSES = frozenset({AttendanceStatus.PRESENT, AttendanceStatus.LATE, AttendanceStatus.HALF_DAY})
MANAGER_ROLES = frozenset({Role.ADMIN, Role.SUPER_ADMIN})


class RegularizationType(str, Enum):
    MISSED_CHECK_IN = "MISSED_CHECK_IN"
    MISSED_CHECK_OUT = "MISSED_CHECK_OUT"
    WRONG_TIME = "WRONG_TIME"


class RequestStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


# Regularization types that insert a session at the requested time once approved.
REGULARIZED_SESSION_TYPES = {
    RegularizationType.MISSED_CHECK_IN: SessionType.CHECK_IN,
    RegularizationType.MISSED_CHECK_OUT: SessionType.CHECK_OUT,
}
