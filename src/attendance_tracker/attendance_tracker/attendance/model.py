from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import AttendanceStatus
from ..profiles.model import Profile


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar date."""

    attendance_id: int
    employee_id: str
    work_date: date
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    status: AttendanceStatus
    total_hours: Optional[Decimal] = None
    created_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.check_in_time is not None and self.check_out_time is None


@dataclass(frozen=True)
class NewAttendanceRecord:
    """Values supplied to the store when a check-in creates a record."""

    employee_id: str
    work_date: date
    check_in_time: Optional[datetime]
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceFilter:
    """Equality/range predicates understood by the record store."""

    employee_id: Optional[str] = None
    work_date: Optional[date] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[AttendanceStatus] = None

    def matches(self, record: AttendanceRecord) -> bool:
        if self.employee_id is not None and record.employee_id != self.employee_id:
            return False
        if self.work_date is not None and record.work_date != self.work_date:
            return False
        if self.start_date is not None and record.work_date < self.start_date:
            return False
        if self.end_date is not None and record.work_date > self.end_date:
            return False
        if self.status is not None and record.status != self.status:
            return False
        return True


@dataclass(frozen=True)
class AttendanceWithProfile:
    """Read-model for reports/exports: a record joined with its employee."""

    record: AttendanceRecord
    profile: Profile
