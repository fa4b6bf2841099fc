from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    note: Optional[str] = None


class StatusStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a daily status."""

    @abstractmethod
    def decide(self, *, work_minutes: int, first_check_in: Optional[datetime]) -> StatusDecision:
        raise NotImplementedError
