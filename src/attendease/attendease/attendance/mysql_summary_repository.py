from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .model import DaySummary
from .repository import DailySummaryRepository

_COLUMNS = """
    user_id, work_date, first_check_in, last_check_out, total_work_mins,
    total_break_mins, overtime_mins, session_count, status
"""


def _row_to_summary(r: dict) -> DaySummary:
    return DaySummary(
        user_id=int(r["user_id"]),
        work_date=r["work_date"],
        work_minutes=int(r["total_work_mins"]),
        break_minutes=int(r["total_break_mins"]),
        overtime_minutes=int(r["overtime_mins"]),
        first_check_in=from_db_datetime(r.get("first_check_in")),
        last_check_out=from_db_datetime(r.get("last_check_out")),
        session_count=int(r["session_count"]),
        status=AttendanceStatus(r["status"]),
    )


class MySQLDailySummaryRepository(DailySummaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, user_id: int, work_date: date) -> Optional[DaySummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM daily_summaries WHERE user_id=%s AND work_date=%s",
                (user_id, work_date),
            )
            r = fetchone(cur)
            return _row_to_summary(r) if r else None

    def replace(self, summary: DaySummary) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO daily_summaries(
                    user_id, work_date, first_check_in, last_check_out, total_work_mins,
                    total_break_mins, overtime_mins, session_count, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    first_check_in=VALUES(first_check_in),
                    last_check_out=VALUES(last_check_out),
                    total_work_mins=VALUES(total_work_mins),
                    total_break_mins=VALUES(total_break_mins),
                    overtime_mins=VALUES(overtime_mins),
                    session_count=VALUES(session_count),
                    status=VALUES(status)
                """,
                (
                    summary.user_id,
                    summary.work_date,
                    to_db_datetime(summary.first_check_in),
                    to_db_datetime(summary.last_check_out),
                    summary.work_minutes,
                    summary.break_minutes,
                    summary.overtime_minutes,
                    summary.session_count,
                    summary.status.value,
                ),
            )

    def list_for_date(self, work_date: date) -> Sequence[DaySummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM daily_summaries WHERE work_date=%s ORDER BY user_id",
                (work_date,),
            )
            return [_row_to_summary(r) for r in fetchall(cur)]
