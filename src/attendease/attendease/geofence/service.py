from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..common.validators import require_coordinates, require_non_empty, require_positive
from ..core.enums import MANAGER_ROLES, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..settings.model import AttendancePolicy
from .geo import admit
from .model import Admission, GeoFence, NewGeoFence
from .repository import GeoFenceRepository

logger = logging.getLogger(__name__)


class GeoFenceService:
    def __init__(
        self,
        geofences: GeoFenceRepository,
        *,
        policy_provider: Optional[Callable[[], AttendancePolicy]] = None,
    ):
        self._geofences = geofences
        self._policy_provider = policy_provider or AttendancePolicy

    @staticmethod
    def _require_manager(current_role: Role) -> None:
        if current_role not in MANAGER_ROLES:
            raise AuthorizationError("You do not have permission to manage geofences")

    def _radius(self, radius_m) -> float:
        if radius_m is None or radius_m == 0:
            return float(self._policy_provider().default_geofence_radius_m)
        return require_positive(radius_m, "radius")

    def list_fences(self, *, current_role: Role) -> Sequence[GeoFence]:
        self._require_manager(current_role)
        return self._geofences.list_all()

    def create_fence(self, *, current_role: Role, data: NewGeoFence) -> GeoFence:
        self._require_manager(current_role)
        name = require_non_empty(data.name, "Name")
        lat, lng = require_coordinates(data.latitude, data.longitude)
        radius = self._radius(data.radius_m)

        fence_id = self._geofences.create(
            name=name, latitude=lat, longitude=lng, radius_m=radius, is_active=bool(data.is_active)
        )
        logger.info("Created geofence %s (%s) radius=%sm", fence_id, name, radius)
        return GeoFence(fence_id=fence_id, name=name, latitude=lat, longitude=lng, radius_m=radius, is_active=bool(data.is_active))

    def update_fence(
        self,
        *,
        current_role: Role,
        fence_id: int,
        name: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        radius_m: Optional[float] = None,
        is_active: Optional[bool] = None,
    ) -> GeoFence:
        self._require_manager(current_role)
        current = self._geofences.get_by_id(int(fence_id))
        if not current:
            raise NotFoundError("Geofence not found")

        new_name = require_non_empty(name, "Name") if name is not None else current.name
        lat, lng = require_coordinates(
            current.latitude if latitude is None else latitude,
            current.longitude if longitude is None else longitude,
        )
        radius = current.radius_m if radius_m is None else require_positive(radius_m, "radius")
        active = current.is_active if is_active is None else bool(is_active)

        self._geofences.update(
            fence_id=current.fence_id, name=new_name, latitude=lat, longitude=lng, radius_m=radius, is_active=active
        )
        logger.info("Updated geofence %s", current.fence_id)
        return GeoFence(fence_id=current.fence_id, name=new_name, latitude=lat, longitude=lng, radius_m=radius, is_active=active)

    def delete_fence(self, *, current_role: Role, fence_id: int) -> None:
        self._require_manager(current_role)
        if not self._geofences.delete(int(fence_id)):
            raise NotFoundError("Geofence not found")
        logger.info("Deleted geofence %s", fence_id)

    def check(self, latitude, longitude) -> Admission:
        """Admission check against the currently active fences."""
        lat, lng = require_coordinates(latitude, longitude)
        return admit(lat, lng, self._geofences.list_active())
