from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import GeoFence


class GeoFenceRepository(Protocol):
    def list_all(self) -> Sequence[GeoFence]:
        raise NotImplementedError

    def list_active(self) -> Sequence[GeoFence]:
        raise NotImplementedError

    def get_by_id(self, fence_id: int) -> Optional[GeoFence]:
        raise NotImplementedError

    def create(self, *, name: str, latitude: float, longitude: float, radius_m: float, is_active: bool = True) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        fence_id: int,
        name: str,
        latitude: float,
        longitude: float,
        radius_m: float,
        is_active: bool,
    ) -> bool:
        raise NotImplementedError

    def delete(self, fence_id: int) -> bool:
        raise NotImplementedError
