from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class DuplicateSessionError(ValidationError):
    """Raised when the requested action repeats the last recorded one."""


class InvalidSessionSequenceError(ValidationError):
    """Raised by strict reconstruction on orphan or overlapping events."""


class OutsideGeofenceError(DomainError):
    """Raised when a check-in/out happens outside every active geofence."""

    def __init__(self, distance_m: int):
        super().__init__(
            f"You are {distance_m}m away from the nearest allowed location. Please move closer."
        )
        self.distance_m = distance_m
