from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional

from ..attendance.model import AttendanceFilter
from ..access.policy import Actor
from ..access.scoped_store import ScopedAttendanceStore, ScopedProfileStore
from ..common.datetime_utils import month_bounds, month_grid, now_local, week_ending
from ..core.constants import DEFAULT_RECENT_HISTORY_LIMIT
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from . import aggregation
from .csv_formatter import DEFAULT_COLUMNS, report_filename, to_csv
from .model import CalendarMonth, EmployeeDashboard, HistoryMonth, ManagerDashboard, ReportData

logger = logging.getLogger(__name__)


class ReportService:
    """Use case: dashboards, calendars and reports.

    Fetches the actor-scoped record sets and hands them to the pure reducers
    in aggregation.py.
    """

    def __init__(
        self,
        attendance: ScopedAttendanceStore,
        profiles: ScopedProfileStore,
        *,
        clock: Callable[[], datetime] = now_local,
        recent_limit: int = DEFAULT_RECENT_HISTORY_LIMIT,
    ):
        self._attendance = attendance
        self._profiles = profiles
        self._clock = clock
        self._recent_limit = int(recent_limit)

    def employee_dashboard(self, actor: Actor, *, now: datetime | None = None) -> EmployeeDashboard:
        now = now or self._clock()
        today = now.date()
        own = actor.profile_id

        month_start, _ = month_bounds(today.year, today.month)
        month = self._attendance.find(actor, AttendanceFilter(employee_id=own, start_date=month_start))
        recent = self._attendance.find(
            actor, AttendanceFilter(employee_id=own), limit=self._recent_limit, newest_first=True
        )

        return EmployeeDashboard(
            today=self._attendance.get_for_employee_and_date(actor, own, today),
            month_summary=aggregation.summary_counts(month),
            recent=list(recent),
        )

    def manager_dashboard(self, actor: Actor, *, now: datetime | None = None) -> ManagerDashboard:
        self._require_manager(actor)
        now = now or self._clock()
        today = now.date()

        employees = self._profiles.list_profiles(actor, role=Role.EMPLOYEE)
        headcount = len(employees)

        todays = self._attendance.find(actor, AttendanceFilter(work_date=today))
        present_ids = aggregation.present_employee_ids(todays)

        window = week_ending(today)
        weekly = self._attendance.find(actor, AttendanceFilter(start_date=window[0], end_date=today))

        return ManagerDashboard(
            total_employees=headcount,
            today=aggregation.today_counts(todays, headcount),
            weekly_trend=aggregation.weekly_trend(weekly, headcount, today),
            departments=aggregation.department_rollup(employees, present_ids),
            absent_today=aggregation.absentee_list(employees, present_ids),
        )

    def team_calendar(self, actor: Actor, year: int, month: int) -> CalendarMonth:
        self._require_manager(actor)
        start, end = month_bounds(year, month)
        records = self._attendance.find(actor, AttendanceFilter(start_date=start, end_date=end))
        return CalendarMonth(
            year=year,
            month=month,
            grid=month_grid(year, month),
            days=aggregation.calendar_day_stats(records, year, month),
        )

    def employee_history(self, actor: Actor, year: int, month: int) -> HistoryMonth:
        start, end = month_bounds(year, month)
        records = self._attendance.find(
            actor, AttendanceFilter(employee_id=actor.profile_id, start_date=start, end_date=end)
        )
        return HistoryMonth(
            year=year,
            month=month,
            grid=month_grid(year, month),
            records=aggregation.records_by_day(records, year, month),
            summary=aggregation.summary_counts(records),
        )

    def build_report(
        self,
        actor: Actor,
        *,
        start: date,
        end: date,
        employee_id: Optional[str] = None,
    ) -> ReportData:
        if start > end:
            raise ValidationError("Report start date must not be after the end date")

        rows = self._attendance.find_with_profiles(
            actor, AttendanceFilter(employee_id=employee_id, start_date=start, end_date=end)
        )
        rows = sorted(rows, key=lambda r: (r.record.work_date, r.profile.name, r.record.attendance_id), reverse=True)
        return ReportData(
            start=start,
            end=end,
            rows=rows,
            summary=aggregation.summary_counts(r.record for r in rows),
        )

    def export_csv(
        self,
        actor: Actor,
        *,
        start: date,
        end: date,
        employee_id: Optional[str] = None,
        columns=DEFAULT_COLUMNS,
    ) -> tuple[str, str]:
        """Return (filename, csv_text) for one report invocation."""
        report = self.build_report(actor, start=start, end=end, employee_id=employee_id)
        logger.info("CSV export by %s: %d rows %s..%s", actor.profile_id, len(report.rows), start, end)
        return report_filename(start, end), to_csv(report.rows, columns)

    def _require_manager(self, actor: Actor) -> None:
        if not actor.is_manager:
            raise AuthorizationError("Manager role required")
