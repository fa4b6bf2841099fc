from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import GeoFence
from .repository import GeoFenceRepository

_COLUMNS = "fence_id, name, latitude, longitude, radius_m, is_active"


def _row_to_fence(r: dict) -> GeoFence:
    return GeoFence(
        fence_id=int(r["fence_id"]),
        name=r["name"],
        latitude=float(r["latitude"]),
        longitude=float(r["longitude"]),
        radius_m=float(r["radius_m"]),
        is_active=bool(r["is_active"]),
    )


class MySQLGeoFenceRepository(GeoFenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[GeoFence]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM geofences ORDER BY created_at DESC, fence_id DESC")
            return [_row_to_fence(r) for r in fetchall(cur)]

    def list_active(self) -> Sequence[GeoFence]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM geofences WHERE is_active=1 ORDER BY fence_id")
            return [_row_to_fence(r) for r in fetchall(cur)]

    def get_by_id(self, fence_id: int) -> Optional[GeoFence]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM geofences WHERE fence_id=%s", (fence_id,))
            r = fetchone(cur)
            return _row_to_fence(r) if r else None

    def create(self, *, name: str, latitude: float, longitude: float, radius_m: float, is_active: bool = True) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO geofences(name, latitude, longitude, radius_m, is_active)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, latitude, longitude, radius_m, int(is_active)),
            )
            return int(cur.lastrowid)

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE geofences
                SET name=%s, latitude=%s, longitude=%s, radius_m=%s, is_active=%s
                WHERE fence_id=%s
                """,
                (name, latitude, longitude, radius_m, int(is_active), fence_id),
            )
            return cur.rowcount > 0

    def delete(self, fence_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM geofences WHERE fence_id=%s", (fence_id,))
            return cur.rowcount > 0
