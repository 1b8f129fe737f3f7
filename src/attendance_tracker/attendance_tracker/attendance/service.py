from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..access.policy import Actor
from ..access.scoped_store import ScopedAttendanceStore
from ..common.datetime_utils import is_today, month_bounds, now_local, today_str
from ..core.constants import DEFAULT_RECENT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import (
    AlreadyCheckedInError,
    DuplicateRecordError,
    NoOpenCheckInError,
    RecordNotFoundError,
    ValidationError,
)
from .factory import CheckInStrategyFactory
from .hours import compute_total_hours
from .model import AttendanceFilter, AttendanceRecord, NewAttendanceRecord

logger = logging.getLogger(__name__)


def _to_stored_precision(now: datetime) -> datetime:
    """Truncate to whole seconds, the precision of the DATETIME columns.

    Status, work date and hours must be decided on the value that is stored.
    """
    return now.replace(microsecond=0)


class AttendanceService:
    """Use case: the daily check-in / check-out lifecycle of one employee."""

    def __init__(
        self,
        store: ScopedAttendanceStore,
        *,
        strategy_factory: CheckInStrategyFactory | None = None,
        clock: Callable[[], datetime] = now_local,
        recent_limit: int = DEFAULT_RECENT_HISTORY_LIMIT,
    ):
        self._store = store
        self._factory = strategy_factory or CheckInStrategyFactory()
        self._clock = clock
        self._recent_limit = int(recent_limit)

    def check_in(self, actor: Actor, *, now: datetime | None = None) -> AttendanceRecord:
        now = _to_stored_precision(now or self._clock())
        today = now.date()

        existing = self._store.get_for_employee_and_date(actor, actor.profile_id, today)
        if existing:
            logger.warning("Duplicate check-in for %s on %s", actor.profile_id, today)
            raise AlreadyCheckedInError(f"Already checked in on {today_str(now)}")

        strategy = self._factory.for_checkin(now=now)
        decision = strategy.decide_checkin(now=now)

        try:
            record = self._store.create(
                actor,
                NewAttendanceRecord(
                    employee_id=actor.profile_id,
                    work_date=today,
                    check_in_time=now,
                    status=decision.status,
                ),
            )
        except DuplicateRecordError:
            # Lost a race with a concurrent check-in; the store's unique key won.
            logger.warning("Concurrent check-in rejected by store for %s on %s", actor.profile_id, today)
            raise AlreadyCheckedInError(f"Already checked in on {today_str(now)}") from None

        logger.info(
            "Check-in %s on %s status=%s%s",
            actor.profile_id,
            today,
            decision.status.value,
            f" ({decision.reason})" if decision.reason else "",
        )
        return record

    def check_out(
        self,
        actor: Actor,
        *,
        now: datetime | None = None,
        work_date: date | None = None,
    ) -> AttendanceRecord:
        """Close the open session of work_date (defaults to the date of now).

        Status is left as decided at check-in. Both check_out_time and
        total_hours are written in a single store update.
        """
        now = _to_stored_precision(now or self._clock())
        target = work_date or now.date()

        record = self._store.get_for_employee_and_date(actor, actor.profile_id, target)
        if not record or record.check_in_time is None:
            logger.warning("Check-out without check-in for %s on %s", actor.profile_id, target)
            raise NoOpenCheckInError(f"No check-in recorded on {target.isoformat()}")
        if record.check_out_time is not None:
            logger.warning("Repeated check-out for %s on %s", actor.profile_id, target)
            raise NoOpenCheckInError(f"Already checked out on {target.isoformat()}")

        hours = compute_total_hours(record.check_in_time, now)

        updated = self._store.update(
            actor,
            record,
            {"check_out_time": now, "total_hours": hours},
            require_open=True,
        )
        if not updated:
            raise NoOpenCheckInError(f"Already checked out on {target.isoformat()}")

        if not is_today(target, now):
            logger.info("Closing %s session of %s after midnight", target, actor.profile_id)
        logger.info("Check-out %s on %s hours=%s", actor.profile_id, target, hours)
        return replace(record, check_out_time=now, total_hours=hours)

    def get_record(self, actor: Actor, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._store.get_for_employee_and_date(actor, employee_id, work_date)

    def get_today_record(self, actor: Actor, *, now: datetime | None = None) -> Optional[AttendanceRecord]:
        now = now or self._clock()
        return self.get_record(actor, actor.profile_id, now.date())

    def recent_records(self, actor: Actor, *, limit: int | None = None) -> Sequence[AttendanceRecord]:
        if limit is None:
            limit = self._recent_limit
        if limit < 1:
            raise ValidationError(f"limit must be at least 1, got {limit}")
        return self._store.find(
            actor,
            AttendanceFilter(employee_id=actor.profile_id),
            limit=limit,
            newest_first=True,
        )

    def month_records(self, actor: Actor, year: int, month: int) -> Sequence[AttendanceRecord]:
        start, end = month_bounds(year, month)
        return self._store.find(
            actor,
            AttendanceFilter(employee_id=actor.profile_id, start_date=start, end_date=end),
        )

    def list_for_day(
        self,
        actor: Actor,
        work_date: date,
        *,
        employee_id: str | None = None,
        status: AttendanceStatus | None = None,
        search: str | None = None,
    ):
        """Records of one day joined with profiles, optionally searched by name or code."""
        rows = self._store.find_with_profiles(
            actor,
            AttendanceFilter(employee_id=employee_id, work_date=work_date, status=status),
        )
        if search:
            needle = search.strip().lower()
            rows = [
                r for r in rows
                if needle in r.profile.name.lower() or needle in r.profile.employee_code.lower()
            ]
        # Newest first; ids are assigned in creation order.
        return sorted(rows, key=lambda r: r.record.attendance_id, reverse=True)

    def set_status(self, actor: Actor, attendance_id: int, status: AttendanceStatus) -> AttendanceRecord:
        """Manual status assignment (the only way to get absent/half-day)."""
        record = self._require_record(actor, attendance_id)
        self._store.update(actor, record, {"status": status})
        logger.info("Status of attendance %s set to %s by %s", attendance_id, status.value, actor.profile_id)
        return replace(record, status=status)

    def delete_record(self, actor: Actor, attendance_id: int) -> None:
        record = self._require_record(actor, attendance_id)
        if not self._store.delete(actor, record):
            raise RecordNotFoundError(f"Attendance record {attendance_id} not found")
        logger.info("Attendance %s deleted by %s", attendance_id, actor.profile_id)

    def _require_record(self, actor: Actor, attendance_id: int) -> AttendanceRecord:
        record = self._store.get_by_id(actor, attendance_id)
        if record is None:
            raise RecordNotFoundError(f"Attendance record {attendance_id} not found")
        return record
