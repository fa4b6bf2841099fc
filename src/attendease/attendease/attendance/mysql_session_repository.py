from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import ensure_aware
from ..core.enums import SessionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, from_db_datetime, to_db_datetime
from .model import AttendanceEvent
from .repository import SessionRepository


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user_between(self, user_id: int, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT session_id, user_id, session_type, occurred_at, latitude, longitude, device_info
                FROM attendance_sessions
                WHERE user_id=%s AND occurred_at BETWEEN %s AND %s
                ORDER BY occurred_at, session_id
                """,
                (user_id, to_db_datetime(start), to_db_datetime(end)),
            )
            return [
                AttendanceEvent(
                    kind=SessionType(r["session_type"]),
                    timestamp=from_db_datetime(r["occurred_at"]),
                    latitude=float(r["latitude"]),
                    longitude=float(r["longitude"]),
                    user_id=int(r["user_id"]),
                    session_id=int(r["session_id"]),
                    device_info=r.get("device_info"),
                )
                for r in fetchall(cur)
            ]

    def create(
        self,
        *,
        user_id: int,
        session_type: SessionType,
        timestamp: datetime,
        latitude: float,
        longitude: float,
        device_info: Optional[str] = None,
    ) -> AttendanceEvent:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_sessions(user_id, session_type, occurred_at, latitude, longitude, device_info)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (user_id, session_type.value, to_db_datetime(timestamp), latitude, longitude, device_info),
            )
            session_id = int(cur.lastrowid)

        return AttendanceEvent(
            kind=session_type,
            timestamp=ensure_aware(timestamp),
            latitude=latitude,
            longitude=longitude,
            user_id=user_id,
            session_id=session_id,
            device_info=device_info,
        )
