from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_number(value, field_name: str) -> float:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Invalid {field_name}")
    return float(value)


def require_coordinates(latitude, longitude) -> tuple[float, float]:
    lat = require_number(latitude, "latitude")
    lng = require_number(longitude, "longitude")
    if not -90.0 <= lat <= 90.0:
        raise ValidationError("Latitude must be between -90 and 90")
    if not -180.0 <= lng <= 180.0:
        raise ValidationError("Longitude must be between -180 and 180")
    return lat, lng


def require_positive(value, field_name: str) -> float:
    number = require_number(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return number
