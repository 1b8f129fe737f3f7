"""Pure date arithmetic used by the engine and the calendar views."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, tzinfo
from typing import List, Optional, Tuple

from ..core.constants import DEFAULT_TREND_DAYS
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def parse_year_month(value: str) -> Tuple[int, int]:
    """Parse YYYY-MM string into (year, month)."""
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM") from None
    return parsed.year, parsed.month


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now(tz)


def today_str(now: datetime) -> str:
    return now.date().isoformat()


def is_today(value: date, now: datetime) -> bool:
    return value == now.date()


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last calendar dates of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move (year, month) by delta months, e.g. -1 for the previous month."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def week_ending(end_date: date, days: int = DEFAULT_TREND_DAYS) -> List[date]:
    """Dates of the window ending at end_date (inclusive), oldest first."""
    return [end_date - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def month_grid(year: int, month: int) -> List[Optional[int]]:
    """Day-of-month values padded with leading None so day 1 lands in its weekday column.

    Columns start on Sunday.
    """
    first = date(year, month, 1)
    # date.weekday(): Monday=0 .. Sunday=6
    leading = (first.weekday() + 1) % 7
    last_day = calendar.monthrange(year, month)[1]
    days: List[Optional[int]] = [None] * leading
    days.extend(range(1, last_day + 1))
    return days
