from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GeoFence:
    """Domain entity: circular admission boundary around a site."""

    fence_id: int
    name: str
    latitude: float
    longitude: float
    radius_m: float
    is_active: bool = True


@dataclass(frozen=True)
class Admission:
    allowed: bool
    nearest_distance_m: int


@dataclass(frozen=True)
class NewGeoFence:
    name: str
    latitude: float
    longitude: float
    radius_m: Optional[float] = None
    is_active: bool = True
