from datetime import date, datetime

import pytest

from src.attendance_tracker.attendance_tracker.common.datetime_utils import (
    is_today,
    month_bounds,
    month_grid,
    parse_iso_date,
    parse_year_month,
    shift_month,
    today_str,
    week_ending,
)
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError


def test_month_bounds_handles_leap_years():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2025, 2) == (date(2025, 2, 1), date(2025, 2, 28))
    assert month_bounds(2025, 12)[1] == date(2025, 12, 31)


def test_is_today_compares_calendar_date():
    now = datetime(2025, 3, 13, 0, 5)
    assert is_today(date(2025, 3, 13), now)
    assert not is_today(date(2025, 3, 12), now)


def test_week_ending_oldest_first():
    window = week_ending(date(2025, 3, 2))
    assert window[0] == date(2025, 2, 24)
    assert window[-1] == date(2025, 3, 2)
    assert len(window) == 7


def test_month_grid_starts_on_sunday():
    # March 2025 starts on a Saturday, June 2025 on a Sunday.
    march = month_grid(2025, 3)
    assert march[:7] == [None] * 6 + [1]
    assert march[-1] == 31

    june = month_grid(2025, 6)
    assert june[0] == 1
    assert len(june) == 30


@pytest.mark.parametrize("value", ["2025-13-01", "12/03/2025", "", None])
def test_parse_iso_date_rejects_garbage(value):
    with pytest.raises(ValidationError):
        parse_iso_date(value)


def test_parse_helpers():
    assert parse_iso_date("2025-03-12") == date(2025, 3, 12)
    assert parse_year_month("2025-03") == (2025, 3)
    with pytest.raises(ValidationError):
        parse_year_month("2025-3x")


def test_shift_month_crosses_years():
    assert shift_month(2025, 1, -1) == (2024, 12)
    assert shift_month(2025, 12, 1) == (2026, 1)
    assert shift_month(2025, 3, 0) == (2025, 3)


def test_today_str():
    assert today_str(datetime(2025, 3, 12, 23, 59)) == "2025-03-12"
