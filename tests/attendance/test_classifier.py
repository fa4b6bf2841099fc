from datetime import datetime, timezone

from src.attendease.attendease.attendance.classifier import classify, overtime_minutes
from src.attendease.attendease.attendance.factory import StatusStrategyFactory, is_late_arrival
from src.attendease.attendease.attendance.strategies.half_day_strategy import HalfDayStrategy
from src.attendease.attendease.attendance.strategies.late_strategy import LateStrategy
from src.attendease.attendease.attendance.strategies.normal_strategy import NormalStrategy
from src.attendease.attendease.common.datetime_utils import IST
from src.attendease.attendease.core.enums import AttendanceStatus


def ist(hour: int, minute: int = 0, second: int = 0) -> datetime:
    return datetime(2026, 2, 2, hour, minute, second, tzinfo=IST)


def test_no_work_and_no_arrival_defaults_to_present():
    result = classify(0, None)

    assert result.status == AttendanceStatus.PRESENT
    assert result.overtime_minutes == 0


def test_full_day_on_time_with_overtime():
    result = classify(600, ist(8, 0), late_threshold="09:30")

    assert result.status == AttendanceStatus.PRESENT
    assert result.overtime_minutes == 120


def test_full_day_late_arrival():
    result = classify(600, ist(10, 0), late_threshold="09:30")

    assert result.status == AttendanceStatus.LATE
    assert result.overtime_minutes == 120


def test_half_day_overrides_late():
    result = classify(120, ist(10, 15), late_threshold="09:30")

    assert result.status == AttendanceStatus.HALF_DAY
    assert result.overtime_minutes == 0


def test_half_day_boundary():
    assert classify(239, ist(9, 0)).status == AttendanceStatus.HALF_DAY
    assert classify(240, ist(9, 0)).status == AttendanceStatus.PRESENT
    assert classify(1, ist(9, 0)).status == AttendanceStatus.HALF_DAY


def test_late_threshold_compares_wall_clock_minutes():
    assert is_late_arrival(ist(9, 30, 59), "09:30") is False
    assert is_late_arrival(ist(9, 31), "09:30") is True


def test_lateness_is_judged_in_ist_regardless_of_input_zone():
    # 04:30 UTC is 10:00 IST
    arrival = datetime(2026, 2, 2, 4, 30, tzinfo=timezone.utc)

    assert classify(500, arrival).status == AttendanceStatus.LATE


def test_configurable_standard_minutes():
    assert overtime_minutes(500, 540) == 0
    assert classify(600, ist(9), standard_work_minutes=540).overtime_minutes == 60


def test_factory_picks_strategy():
    factory = StatusStrategyFactory(late_threshold="09:30", half_day_minutes=240)

    assert isinstance(factory.for_day(work_minutes=480, first_check_in=ist(9)), NormalStrategy)
    assert isinstance(factory.for_day(work_minutes=480, first_check_in=ist(9, 45)), LateStrategy)
    assert isinstance(factory.for_day(work_minutes=100, first_check_in=ist(9, 45)), HalfDayStrategy)
    assert isinstance(factory.for_day(work_minutes=0, first_check_in=None), NormalStrategy)


def test_late_decision_carries_note():
    result = classify(480, ist(9, 47))

    assert result.note == "Arrived 09:47 (threshold 09:30)"
