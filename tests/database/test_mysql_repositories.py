from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from src.attendease.attendease.attendance.model import DaySummary
from src.attendease.attendease.attendance.mysql_session_repository import MySQLSessionRepository
from src.attendease.attendease.attendance.mysql_summary_repository import MySQLDailySummaryRepository
from src.attendease.attendease.common.datetime_utils import IST, ist_day_range
from src.attendease.attendease.core.enums import AttendanceStatus, RegularizationType, RequestStatus, SessionType
from src.attendease.attendease.database.mysql_base import from_db_datetime, to_db_datetime
from src.attendease.attendease.regularization.mysql_regularization_repository import MySQLRegularizationRepository


class FakeCursor:
    def __init__(self, rows=None, lastrowid=0):
        self.rows = list(rows or [])
        self.lastrowid = lastrowid
        self.rowcount = 1
        self.executed: list[tuple[str, tuple]] = []

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), params))

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return self.rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, cursor: FakeCursor):
        self.cursor = cursor
        self.connection = FakeConnection(cursor)

    def connect(self):
        return self.connection


def test_datetime_round_trip_through_naive_utc():
    aware = datetime(2026, 2, 2, 9, 30, tzinfo=IST)

    stored = to_db_datetime(aware)

    assert stored == datetime(2026, 2, 2, 4, 0)
    assert stored.tzinfo is None
    assert from_db_datetime(stored) == aware
    assert to_db_datetime(None) is None


def test_summary_replace_is_an_upsert():
    factory = FakeConnFactory(FakeCursor())
    repo = MySQLDailySummaryRepository(factory)
    summary = DaySummary(
        user_id=3,
        work_date=date(2026, 2, 2),
        work_minutes=500,
        break_minutes=20,
        overtime_minutes=20,
        first_check_in=datetime(2026, 2, 2, 9, 0, tzinfo=IST),
        last_check_out=None,
        session_count=3,
        status=AttendanceStatus.LATE,
    )

    repo.replace(summary)

    sql, params = factory.cursor.executed[0]
    assert "ON DUPLICATE KEY UPDATE" in sql
    assert params == (3, date(2026, 2, 2), datetime(2026, 2, 2, 3, 30), None, 500, 20, 20, 3, "LATE")
    assert factory.connection.committed and factory.connection.closed


def test_summary_get_maps_row():
    row = {
        "user_id": 3,
        "work_date": date(2026, 2, 2),
        "first_check_in": datetime(2026, 2, 2, 3, 30),
        "last_check_out": None,
        "total_work_mins": 120,
        "total_break_mins": 0,
        "overtime_mins": 0,
        "session_count": 1,
        "status": "HALF_DAY",
    }
    repo = MySQLDailySummaryRepository(FakeConnFactory(FakeCursor([row])))

    summary = repo.get(3, date(2026, 2, 2))

    assert summary.status == AttendanceStatus.HALF_DAY
    assert summary.first_check_in == datetime(2026, 2, 2, 3, 30, tzinfo=timezone.utc)


def test_session_create_returns_event_with_id():
    factory = FakeConnFactory(FakeCursor(lastrowid=17))
    repo = MySQLSessionRepository(factory)

    event = repo.create(
        user_id=3,
        session_type=SessionType.CHECK_IN,
        timestamp=datetime(2026, 2, 2, 9, 0, tzinfo=IST),
        latitude=1.0,
        longitude=2.0,
    )

    assert event.session_id == 17
    assert event.kind == SessionType.CHECK_IN
    _, params = factory.cursor.executed[0]
    assert params == (3, "CHECK_IN", datetime(2026, 2, 2, 3, 30), 1.0, 2.0, None)


def test_failed_statement_rolls_back():
    class BrokenCursor(FakeCursor):
        def execute(self, sql, params=()):
            raise RuntimeError("boom")

    factory = FakeConnFactory(BrokenCursor())

    with pytest.raises(RuntimeError):
        MySQLDailySummaryRepository(factory).list_for_date(date(2026, 2, 2))

    assert factory.connection.rolled_back is True
    assert factory.connection.closed is True


def test_session_day_query_ends_on_last_millisecond():
    factory = FakeConnFactory(FakeCursor())

    MySQLSessionRepository(factory).list_for_user_between(3, *ist_day_range(date(2026, 2, 2)))

    sql, params = factory.cursor.executed[0]
    assert "BETWEEN" in sql
    assert params == (3, datetime(2026, 2, 1, 18, 30), datetime(2026, 2, 2, 18, 29, 59, 999000))


def test_regularization_create_stores_pending_request():
    factory = FakeConnFactory(FakeCursor(lastrowid=5))
    repo = MySQLRegularizationRepository(factory)

    rid = repo.create(
        user_id=3,
        work_date=date(2026, 2, 2),
        reg_type=RegularizationType.MISSED_CHECK_OUT,
        reason="Forgot",
        requested_time=datetime(2026, 2, 2, 18, 0, tzinfo=IST),
    )

    assert rid == 5
    _, params = factory.cursor.executed[0]
    assert params == (3, date(2026, 2, 2), "MISSED_CHECK_OUT", "Forgot", "PENDING", datetime(2026, 2, 2, 12, 30))


def test_regularization_get_maps_row():
    row = {
        "request_id": 5,
        "user_id": 3,
        "work_date": date(2026, 2, 2),
        "reg_type": "MISSED_CHECK_IN",
        "reason": "Phone was off",
        "status": "APPROVED",
        "requested_time": datetime(2026, 2, 2, 3, 40),
        "created_at": datetime(2026, 2, 3, 4, 0),
        "reviewer_id": 1,
        "review_note": None,
        "reviewed_at": datetime(2026, 2, 3, 5, 0),
    }
    repo = MySQLRegularizationRepository(FakeConnFactory(FakeCursor([row])))

    req = repo.get(5)

    assert req.reg_type == RegularizationType.MISSED_CHECK_IN
    assert req.status == RequestStatus.APPROVED
    assert req.requested_time == datetime(2026, 2, 2, 9, 10, tzinfo=IST)
    assert req.reviewer_id == 1


def test_regularization_decide_only_touches_pending_rows():
    cursor = FakeCursor()
    cursor.rowcount = 0
    repo = MySQLRegularizationRepository(FakeConnFactory(cursor))

    decided = repo.decide(request_id=5, status=RequestStatus.REJECTED, reviewer_id=1, review_note="late")

    sql, params = cursor.executed[0]
    assert decided is False
    assert "WHERE request_id=%s AND status=%s" in sql
    assert params == ("REJECTED", 1, "late", 5, "PENDING")
