from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..core.enums import RegularizationType, RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .model import Regularization
from .repository import RegularizationRepository

_COLUMNS = """
    request_id, user_id, work_date, reg_type, reason, status, requested_time,
    created_at, reviewer_id, review_note, reviewed_at
"""


def _to_regularization(r: Dict[str, Any]) -> Regularization:
    return Regularization(
        request_id=int(r["request_id"]),
        user_id=int(r["user_id"]),
        work_date=r["work_date"],
        reg_type=RegularizationType(r["reg_type"]),
        reason=r["reason"],
        status=RequestStatus(r["status"]),
        requested_time=from_db_datetime(r.get("requested_time")),
        created_at=from_db_datetime(r.get("created_at")),
        reviewer_id=int(r["reviewer_id"]) if r.get("reviewer_id") is not None else None,
        review_note=r.get("review_note"),
        reviewed_at=from_db_datetime(r.get("reviewed_at")),
    )


class MySQLRegularizationRepository(RegularizationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        user_id: int,
        work_date: date,
        reg_type: RegularizationType,
        reason: str,
        requested_time: Optional[datetime],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO regularizations(user_id, work_date, reg_type, reason, status, requested_time)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(user_id),
                    work_date,
                    reg_type.value,
                    reason,
                    RequestStatus.PENDING.value,
                    to_db_datetime(requested_time),
                ),
            )
            return int(cur.lastrowid)

    def get(self, request_id: int) -> Optional[Regularization]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM regularizations WHERE request_id=%s", (int(request_id),))
            r = fetchone(cur)
            return _to_regularization(r) if r else None

    def find_pending(self, user_id: int, work_date: date, reg_type: RegularizationType) -> Optional[Regularization]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM regularizations
                WHERE user_id=%s AND work_date=%s AND reg_type=%s AND status=%s
                LIMIT 1
                """,
                (int(user_id), work_date, reg_type.value, RequestStatus.PENDING.value),
            )
            r = fetchone(cur)
            return _to_regularization(r) if r else None

    def list_for_user(
        self, user_id: int, *, status: Optional[RequestStatus] = None, limit: int = 50
    ) -> Sequence[Regularization]:
        clauses = ["user_id=%s"]
        params: list[object] = [int(user_id)]
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM regularizations
                WHERE {" AND ".join(clauses)}
                ORDER BY created_at DESC, request_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [_to_regularization(r) for r in fetchall(cur)]

    def decide(
        self,
        *,
        request_id: int,
        status: RequestStatus,
        reviewer_id: int,
        review_note: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE regularizations
                SET status=%s, reviewer_id=%s, review_note=%s, reviewed_at=UTC_TIMESTAMP()
                WHERE request_id=%s AND status=%s
                """,
                (
                    status.value,
                    int(reviewer_id),
                    review_note,
                    int(request_id),
                    RequestStatus.PENDING.value,
                ),
            )
            return cur.rowcount > 0
