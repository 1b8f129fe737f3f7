"""Pure reducers over attendance records and profiles.

Nothing here fetches data or checks identity: callers hand in a record set
already scoped for the actor. Every function returns the same result for the
same input regardless of the order the records arrive in.
"""

from __future__ import annotations

from collections import Counter
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Set

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import month_bounds, week_ending
from ..core.constants import DEFAULT_TREND_DAYS, UNASSIGNED_DEPARTMENT
from ..core.enums import AttendanceStatus
from ..profiles.model import Profile
from .model import Absentee, DayStats, DepartmentStat, SummaryCounts, TodayCounts, TrendPoint

# Statuses that count as "showed up" in trend and calendar views.
ATTENDED_STATUSES = frozenset({AttendanceStatus.PRESENT, AttendanceStatus.LATE})


def monthly_percentage(part: int, whole: int) -> int:
    """Guarded percentage: 0 when whole is 0, otherwise rounded half-up."""
    if whole == 0:
        return 0
    return int((Decimal(100) * part / Decimal(whole)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def summary_counts(records: Iterable[AttendanceRecord]) -> SummaryCounts:
    counts: Counter = Counter()
    total_hours = Decimal("0.00")
    for r in records:
        counts[r.status] += 1
        total_hours += r.total_hours or Decimal("0")
    return SummaryCounts(
        present=counts[AttendanceStatus.PRESENT],
        absent=counts[AttendanceStatus.ABSENT],
        late=counts[AttendanceStatus.LATE],
        half_day=counts[AttendanceStatus.HALF_DAY],
        total_hours=total_hours,
    )


def weekly_trend(
    records: Iterable[AttendanceRecord],
    total_employee_count: int,
    end_date: date,
    *,
    days: int = DEFAULT_TREND_DAYS,
) -> List[TrendPoint]:
    """Per-day attendance for the window ending at end_date, oldest first.

    absent is the headcount minus the records of that day: anyone without a
    record counts as absent, whatever the stored statuses say. Unlike a bare
    headcount - records, absent is floored at 0: the headcount covers
    employees only, but a day's records may include managers' check-ins.
    """
    window = week_ending(end_date, days)
    wanted = set(window)
    per_day: Dict[date, List[AttendanceRecord]] = {d: [] for d in window}
    for r in records:
        if r.work_date in wanted:
            per_day[r.work_date].append(r)

    trend = []
    for d in window:
        day_records = per_day[d]
        trend.append(
            TrendPoint(
                day=d,
                label=d.strftime("%a"),
                present=sum(1 for r in day_records if r.status in ATTENDED_STATUSES),
                absent=max(total_employee_count - len(day_records), 0),
            )
        )
    return trend


def present_employee_ids(records: Iterable[AttendanceRecord]) -> Set[str]:
    """Ids of everyone holding a record, whatever its status."""
    return {r.employee_id for r in records}


def _department_of(profile: Profile) -> str:
    return (profile.department or "").strip() or UNASSIGNED_DEPARTMENT


def department_rollup(profiles: Iterable[Profile], present_ids: Set[str]) -> List[DepartmentStat]:
    totals: Counter = Counter()
    present: Counter = Counter()
    for p in profiles:
        if not p.is_employee:
            continue
        dept = _department_of(p)
        totals[dept] += 1
        if p.profile_id in present_ids:
            present[dept] += 1

    return [
        DepartmentStat(
            department=dept,
            present=present[dept],
            total=totals[dept],
            percentage=monthly_percentage(present[dept], totals[dept]),
        )
        for dept in sorted(totals)
    ]


def absentee_list(profiles: Iterable[Profile], present_ids: Set[str]) -> List[Absentee]:
    absentees = [
        Absentee(name=p.name, employee_code=p.employee_code, department=p.department or "")
        for p in profiles
        if p.is_employee and p.profile_id not in present_ids
    ]
    return sorted(absentees, key=lambda a: (a.name, a.employee_code))


def today_counts(records: Iterable[AttendanceRecord], total_employee_count: int) -> TodayCounts:
    """Dashboard tiles for one day's records: absent is the headcount complement, floored at 0."""
    statuses = Counter(r.status for r in records)
    present = statuses[AttendanceStatus.PRESENT]
    late = statuses[AttendanceStatus.LATE]
    return TodayCounts(
        present=present,
        late=late,
        absent=max(total_employee_count - (present + late), 0),
        attendance_percentage=monthly_percentage(present, total_employee_count),
    )


def day_stats(records: Iterable[AttendanceRecord], day: date) -> DayStats:
    """Team calendar cell: statuses recorded on one day (absent here is the stored status)."""
    day_records = [r for r in records if r.work_date == day]
    attended = sum(1 for r in day_records if r.status in ATTENDED_STATUSES)
    return DayStats(
        day=day,
        present=attended,
        absent=sum(1 for r in day_records if r.status == AttendanceStatus.ABSENT),
        total=len(day_records),
        percentage=monthly_percentage(attended, len(day_records)),
    )


def calendar_day_stats(records: Iterable[AttendanceRecord], year: int, month: int) -> Dict[int, DayStats]:
    """DayStats for every day of the month holding at least one record, keyed by day of month."""
    first, last = month_bounds(year, month)
    by_day: Dict[date, List[AttendanceRecord]] = {}
    for r in records:
        if first <= r.work_date <= last:
            by_day.setdefault(r.work_date, []).append(r)
    return {d.day: day_stats(rs, d) for d, rs in sorted(by_day.items())}


def records_by_day(records: Iterable[AttendanceRecord], year: int, month: int) -> Dict[int, AttendanceRecord]:
    """One employee's records of a month keyed by day of month."""
    first, last = month_bounds(year, month)
    return {r.work_date.day: r for r in records if first <= r.work_date <= last}
