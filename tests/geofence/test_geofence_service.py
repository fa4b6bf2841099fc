from __future__ import annotations

from typing import Optional

import pytest

from src.attendease.attendease.core.enums import Role
from src.attendease.attendease.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.attendease.attendease.geofence.model import GeoFence, NewGeoFence
from src.attendease.attendease.geofence.service import GeoFenceService
from src.attendease.attendease.settings.model import AttendancePolicy


class InMemoryGeoFences:
    def __init__(self):
        self._by_id: dict[int, GeoFence] = {}
        self._next_id = 1

    def list_all(self):
        return list(self._by_id.values())

    def list_active(self):
        return [f for f in self._by_id.values() if f.is_active]

    def get_by_id(self, fence_id: int) -> Optional[GeoFence]:
        return self._by_id.get(fence_id)

    def create(self, *, name, latitude, longitude, radius_m, is_active=True) -> int:
        fid = self._next_id
        self._next_id += 1
        self._by_id[fid] = GeoFence(fid, name, latitude, longitude, radius_m, is_active)
        return fid

    def update(self, *, fence_id, name, latitude, longitude, radius_m, is_active) -> bool:
        if fence_id not in self._by_id:
            return False
        self._by_id[fence_id] = GeoFence(fence_id, name, latitude, longitude, radius_m, is_active)
        return True

    def delete(self, fence_id: int) -> bool:
        return self._by_id.pop(fence_id, None) is not None


@pytest.fixture
def repo():
    return InMemoryGeoFences()


def test_create_uses_policy_default_radius(repo):
    svc = GeoFenceService(repo, policy_provider=lambda: AttendancePolicy(default_geofence_radius_m=350))

    fence = svc.create_fence(current_role=Role.ADMIN, data=NewGeoFence(name=" HQ ", latitude=28.6, longitude=77.2))

    assert fence.radius_m == 350
    assert fence.name == "HQ"
    assert repo.get_by_id(fence.fence_id) == fence


def test_create_default_radius_is_200(repo):
    svc = GeoFenceService(repo)

    fence = svc.create_fence(current_role=Role.SUPER_ADMIN, data=NewGeoFence(name="Plant", latitude=1.0, longitude=2.0))

    assert fence.radius_m == 200


def test_employees_cannot_manage_fences(repo):
    svc = GeoFenceService(repo)

    with pytest.raises(AuthorizationError):
        svc.create_fence(current_role=Role.EMPLOYEE, data=NewGeoFence(name="X", latitude=1.0, longitude=2.0))
    with pytest.raises(AuthorizationError):
        svc.list_fences(current_role=Role.MANAGEMENT)


@pytest.mark.parametrize(
    "data",
    [
        NewGeoFence(name="", latitude=1.0, longitude=2.0),
        NewGeoFence(name="X", latitude=100.0, longitude=2.0),
        NewGeoFence(name="X", latitude=1.0, longitude=-181.0),
        NewGeoFence(name="X", latitude=1.0, longitude=2.0, radius_m=-5),
    ],
)
def test_create_validates_input(repo, data):
    with pytest.raises(ValidationError):
        GeoFenceService(repo).create_fence(current_role=Role.ADMIN, data=data)
    assert repo.list_all() == []


def test_update_keeps_unspecified_fields(repo):
    svc = GeoFenceService(repo)
    created = svc.create_fence(current_role=Role.ADMIN, data=NewGeoFence(name="HQ", latitude=1.0, longitude=2.0, radius_m=300))

    updated = svc.update_fence(current_role=Role.ADMIN, fence_id=created.fence_id, is_active=False)

    assert updated.radius_m == 300
    assert updated.name == "HQ"
    assert updated.is_active is False
    assert repo.list_active() == []


def test_update_and_delete_missing_fence(repo):
    svc = GeoFenceService(repo)

    with pytest.raises(NotFoundError):
        svc.update_fence(current_role=Role.ADMIN, fence_id=42, name="Nope")
    with pytest.raises(NotFoundError):
        svc.delete_fence(current_role=Role.ADMIN, fence_id=42)


def test_check_only_considers_active_fences(repo):
    svc = GeoFenceService(repo)
    svc.create_fence(current_role=Role.ADMIN, data=NewGeoFence(name="Closed", latitude=0.0, longitude=0.0, is_active=False))

    assert svc.check(45.0, 45.0).allowed is True

    svc.create_fence(current_role=Role.ADMIN, data=NewGeoFence(name="Open", latitude=0.0, longitude=0.0, radius_m=100))

    result = svc.check(0.001, 0.0)
    assert result.allowed is False
    assert result.nearest_distance_m == 111
