from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Any, Mapping, Optional

from src.attendance_tracker.attendance_tracker.attendance.model import (
    AttendanceFilter,
    AttendanceRecord,
    AttendanceWithProfile,
    NewAttendanceRecord,
)
from src.attendance_tracker.attendance_tracker.core.enums import Role
from src.attendance_tracker.attendance_tracker.core.exceptions import DuplicateRecordError, StoreUnavailableError
from src.attendance_tracker.attendance_tracker.profiles.model import Profile


class InMemoryProfiles:
    def __init__(self, profiles=()):
        self.by_id: dict[str, Profile] = {p.profile_id: p for p in profiles}

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        return self.by_id.get(profile_id)

    def get_by_email(self, email: str) -> Optional[Profile]:
        return next((p for p in self.by_id.values() if p.email == email), None)

    def get_by_employee_code(self, employee_code: str) -> Optional[Profile]:
        return next((p for p in self.by_id.values() if p.employee_code == employee_code), None)

    def list_profiles(self, *, role: Optional[Role] = None):
        items = [p for p in self.by_id.values() if role is None or p.role == role]
        return sorted(items, key=lambda p: p.name)

    def create(self, profile: Profile) -> Profile:
        if profile.profile_id in self.by_id or self.get_by_email(profile.email):
            raise DuplicateRecordError(profile.profile_id)
        self.by_id[profile.profile_id] = profile
        return profile

    def update(self, profile_id: str, fields: Mapping[str, str]) -> bool:
        current = self.by_id.get(profile_id)
        if not current:
            return False
        self.by_id[profile_id] = replace(current, **fields)
        return True


class InMemoryAttendance:
    """Keyed by (employee_id, work_date) like the UNIQUE key of the real table."""

    def __init__(self, profiles: InMemoryProfiles | None = None):
        self._profiles = profiles or InMemoryProfiles()
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        self._id = 0
        self.updates: list[tuple[int, dict]] = []

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        """Test helper: store a fully built record."""
        self._by_key[(record.employee_id, record.work_date)] = record
        self._id = max(self._id, record.attendance_id)
        return record

    def all(self) -> list[AttendanceRecord]:
        return list(self._by_key.values())

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return next((r for r in self._by_key.values() if r.attendance_id == attendance_id), None)

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((employee_id, work_date))

    def create(self, record: NewAttendanceRecord) -> AttendanceRecord:
        key = (record.employee_id, record.work_date)
        if key in self._by_key:
            raise DuplicateRecordError(f"duplicate {key}")
        self._id += 1
        created = AttendanceRecord(
            attendance_id=self._id,
            employee_id=record.employee_id,
            work_date=record.work_date,
            check_in_time=record.check_in_time,
            check_out_time=None,
            status=record.status,
            total_hours=None,
            created_at=datetime(2000, 1, 1),
        )
        self._by_key[key] = created
        return created

    def update(self, attendance_id: int, fields: Mapping[str, Any], *, require_open: bool = False) -> bool:
        for key, current in list(self._by_key.items()):
            if current.attendance_id == attendance_id:
                if require_open and current.check_out_time is not None:
                    return False
                self._by_key[key] = replace(current, **fields)
                self.updates.append((attendance_id, dict(fields)))
                return True
        return False

    def find(self, criteria: AttendanceFilter, *, limit=None, newest_first=False):
        items = sorted(
            (r for r in self._by_key.values() if criteria.matches(r)),
            key=lambda r: (r.work_date, r.attendance_id),
            reverse=newest_first,
        )
        return items[:limit] if limit is not None else items

    def find_with_profiles(self, criteria: AttendanceFilter):
        return [
            AttendanceWithProfile(record=r, profile=self._profiles.get_by_id(r.employee_id))
            for r in self.find(criteria, newest_first=True)
            if self._profiles.get_by_id(r.employee_id)
        ]

    def delete(self, attendance_id: int) -> bool:
        for key, current in list(self._by_key.items()):
            if current.attendance_id == attendance_id:
                del self._by_key[key]
                return True
        return False


class RacingAttendance(InMemoryAttendance):
    """Lookup says "no record" but the insert hits the unique key (concurrent check-in)."""

    def get_for_employee_and_date(self, employee_id: str, work_date: date):
        return None

    def create(self, record: NewAttendanceRecord) -> AttendanceRecord:
        raise DuplicateRecordError("uq_attendance_employee_date")


class BrokenAttendance(InMemoryAttendance):
    def get_for_employee_and_date(self, employee_id: str, work_date: date):
        raise StoreUnavailableError("connection refused")

    def find(self, criteria, *, limit=None, newest_first=False):
        raise StoreUnavailableError("connection refused")


def make_record(
    attendance_id: int,
    employee_id: str,
    work_date: date,
    status,
    *,
    check_in: datetime | None = None,
    check_out: datetime | None = None,
    hours=None,
) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=attendance_id,
        employee_id=employee_id,
        work_date=work_date,
        check_in_time=check_in,
        check_out_time=check_out,
        status=status,
        total_hours=hours,
    )
