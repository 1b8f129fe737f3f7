from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from src.attendance_tracker.attendance_tracker.attendance.hours import compute_total_hours
from src.attendance_tracker.attendance_tracker.core.exceptions import InvalidDurationError


def test_eight_and_a_half_hours():
    assert compute_total_hours(datetime(2025, 1, 1, 9, 0), datetime(2025, 1, 1, 17, 30)) == Decimal("8.50")


def test_rounds_to_two_decimals_half_up():
    start = datetime(2025, 1, 1, 9, 0)
    # 1h 0m 18s = 1.005 h
    assert compute_total_hours(start, start + timedelta(hours=1, seconds=18)) == Decimal("1.01")
    # 20 minutes = 0.3333.. h
    assert compute_total_hours(start, start + timedelta(minutes=20)) == Decimal("0.33")


def test_zero_duration_is_allowed():
    start = datetime(2025, 1, 1, 9, 0)
    assert compute_total_hours(start, start) == Decimal("0.00")


def test_negative_duration_rejected():
    with pytest.raises(InvalidDurationError):
        compute_total_hours(datetime(2025, 1, 1, 17, 0), datetime(2025, 1, 1, 9, 0))


def test_aware_timestamps_across_midnight():
    tz = timezone(timedelta(hours=2))
    start = datetime(2025, 1, 1, 22, 0, tzinfo=tz)
    end = datetime(2025, 1, 2, 2, 15, tzinfo=tz)
    assert compute_total_hours(start, end) == Decimal("4.25")
