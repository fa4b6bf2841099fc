from __future__ import annotations

import math
from typing import Sequence

from ..core.constants import EARTH_RADIUS_M
from .model import Admission, GeoFence


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in meters on a spherical earth."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def round_meters(distance: float) -> int:
    """Nearest whole meter, halves rounded up."""
    return int(math.floor(distance + 0.5))


def admit(latitude: float, longitude: float, fences: Sequence[GeoFence]) -> Admission:
    """Decide whether a point may check in/out.

    Callers pass active fences only. With no fences configured admission is
    open. Being inside any one fence is enough; the nearest distance is
    reported either way for user-facing messages.
    """

    if not fences:
        return Admission(allowed=True, nearest_distance_m=0)

    nearest = math.inf
    allowed = False
    for fence in fences:
        distance = haversine_distance(latitude, longitude, fence.latitude, fence.longitude)
        nearest = min(nearest, distance)
        if distance <= fence.radius_m:
            allowed = True

    return Admission(allowed=allowed, nearest_distance_m=round_meters(nearest))
