from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Sequence

from ..attendance.repository import SessionRepository
from ..attendance.service import AttendanceService
from ..common.datetime_utils import ensure_aware, ist_date, now_utc
from ..common.validators import require_coordinates
from ..core.exceptions import ValidationError
from .queue import OfflineQueue, QueuedEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncResult:
    success: bool
    session_id: Optional[int] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class SyncReport:
    results: list[SyncResult] = field(default_factory=list)
    days: list[date] = field(default_factory=list)

    @property
    def synced(self) -> int:
        return sum(1 for r in self.results if r.success)


class SyncService:
    """Uploads entries recorded offline and refreshes the affected days.

    Entries are stored with their original timestamps. They were admitted on
    the device, so no geofence or duplicate check is repeated here.
    """

    def __init__(self, sessions: SessionRepository, attendance: AttendanceService):
        self._sessions = sessions
        self._attendance = attendance

    def sync(self, user_id: int, entries: Sequence[QueuedEntry], *, now: datetime | None = None) -> SyncReport:
        if not entries:
            raise ValidationError("No entries to sync")
        report = self._upload(user_id, entries)
        self._refresh_days(user_id, report.days, now=now)
        return report

    def flush(self, user_id: int, queue: OfflineQueue, *, now: datetime | None = None) -> SyncReport:
        """Sync everything in ``queue``; failed entries go back into it.

        Failed entries are re-queued before the day summaries are refreshed,
        so a recompute error never drops them from the queue.
        """
        if not len(queue):
            return SyncReport()
        entries = queue.drain()
        report = self._upload(user_id, entries)
        queue.extend(e for e, r in zip(entries, report.results) if not r.success)
        self._refresh_days(user_id, report.days, now=now)
        return report

    def _upload(self, user_id: int, entries: Sequence[QueuedEntry]) -> SyncReport:
        results: list[SyncResult] = []
        days: list[date] = []
        for entry in entries:
            try:
                lat, lng = require_coordinates(entry.latitude, entry.longitude)
                timestamp = ensure_aware(entry.timestamp)
                created = self._sessions.create(
                    user_id=user_id,
                    session_type=entry.session_type,
                    timestamp=timestamp,
                    latitude=lat,
                    longitude=lng,
                    device_info=entry.device_info,
                )
            except Exception as exc:
                # One bad entry must not abort the rest of the batch.
                logger.warning("Failed to sync %s entry for user %s: %s", entry.session_type, user_id, exc)
                results.append(SyncResult(success=False, error=str(exc)))
                continue

            results.append(SyncResult(success=True, session_id=created.session_id))
            day = ist_date(timestamp)
            if day not in days:
                days.append(day)

        logger.info("Synced %d/%d offline entries for user %s", sum(r.success for r in results), len(results), user_id)
        return SyncReport(results=results, days=days)

    def _refresh_days(self, user_id: int, days: Sequence[date], *, now: datetime | None) -> None:
        now = ensure_aware(now or now_utc())
        for day in days:
            self._attendance.recompute_day(user_id, day, now=now)
