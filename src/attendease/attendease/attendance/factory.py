from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import parse_hhmm, to_ist
from ..core.constants import HALF_DAY_MINUTES, LATE_THRESHOLD
from .strategies.base import StatusStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


def is_late_arrival(first_check_in: datetime, late_threshold: str = LATE_THRESHOLD) -> bool:
    """True when the IST wall-clock minute of arrival is strictly after the threshold."""
    arrived = to_ist(first_check_in).time().replace(second=0, microsecond=0)
    return arrived > parse_hhmm(late_threshold)


@dataclass
class StatusStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules.

    Lateness is evaluated first and the half-day rule is applied after it,
    so a short day is HALF_DAY even when the arrival was late.
    """

    late_threshold: str = LATE_THRESHOLD
    half_day_minutes: int = HALF_DAY_MINUTES

    def for_day(self, *, work_minutes: int, first_check_in: Optional[datetime]) -> StatusStrategy:
        strategy: StatusStrategy = NormalStrategy()
        if first_check_in is not None and is_late_arrival(first_check_in, self.late_threshold):
            strategy = LateStrategy(self.late_threshold)
        if 0 < work_minutes < self.half_day_minutes:
            strategy = HalfDayStrategy(self.half_day_minutes)
        return strategy
