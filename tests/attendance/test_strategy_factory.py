from datetime import datetime

import pytest

from src.attendance_tracker.attendance_tracker.attendance.factory import CheckInStrategyFactory
from src.attendance_tracker.attendance_tracker.attendance.strategies.late_strategy import LateStrategy
from src.attendance_tracker.attendance_tracker.attendance.strategies.on_time_strategy import OnTimeStrategy
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError


def test_factory_checkin_on_time_before_cutoff():
    factory = CheckInStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2025, 1, 1, 8, 59, 59))

    assert isinstance(strategy, OnTimeStrategy)
    assert strategy.decide_checkin(now=datetime(2025, 1, 1, 8, 59, 59)).status == AttendanceStatus.PRESENT


def test_factory_checkin_late_at_cutoff():
    factory = CheckInStrategyFactory()
    now = datetime(2025, 1, 1, 9, 0, 0)
    strategy = factory.for_checkin(now=now)

    assert isinstance(strategy, LateStrategy)
    decision = strategy.decide_checkin(now=now)
    assert decision.status == AttendanceStatus.LATE
    assert "09:00:00" in decision.reason


def test_factory_respects_configured_cutoff():
    factory = CheckInStrategyFactory(cutoff_hour=10)

    assert isinstance(factory.for_checkin(now=datetime(2025, 1, 1, 9, 30)), OnTimeStrategy)
    assert isinstance(factory.for_checkin(now=datetime(2025, 1, 1, 10, 0)), LateStrategy)


def test_factory_rejects_out_of_range_cutoff():
    with pytest.raises(ValidationError):
        CheckInStrategyFactory(cutoff_hour=24)
