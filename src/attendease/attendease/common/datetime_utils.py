from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

# Business rules (lateness, day boundaries) are always evaluated in IST.
IST = timezone(timedelta(hours=5, minutes=30), name="IST")


def parse_hhmm(value: str) -> time:
    """Parse a 24-hour ``HH:MM`` string into a time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def now_utc() -> datetime:
    """Current aware time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC (how the database stores them)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_ist(value: datetime) -> datetime:
    return ensure_aware(value).astimezone(IST)


def ist_date(value: datetime) -> date:
    """Calendar day of an instant in the reference timezone."""
    return to_ist(value).date()


def ist_day_range(work_date: date) -> tuple[datetime, datetime]:
    """Inclusive start/end instants of an IST calendar day.

    The end stops at the last millisecond; the DATETIME(3) columns would round
    a microsecond-precision end up into the next day.
    """
    start = datetime.combine(work_date, time.min, tzinfo=IST)
    end = datetime.combine(work_date, time(23, 59, 59, 999000), tzinfo=IST)
    return start, end


def whole_minutes(start: datetime, end: datetime) -> int:
    """Floor-truncated minutes between two instants, never negative."""
    seconds = (ensure_aware(end) - ensure_aware(start)).total_seconds()
    return max(int(seconds // 60), 0)


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60}h {minutes % 60}m"


def format_ist_time(value: datetime) -> str:
    return to_ist(value).strftime("%I:%M %p")
