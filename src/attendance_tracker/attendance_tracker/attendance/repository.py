from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import AttendanceFilter, AttendanceRecord, AttendanceWithProfile, NewAttendanceRecord

# Columns the engine is allowed to change after a record was created.
UPDATABLE_ATTENDANCE_FIELDS = frozenset({"check_out_time", "total_hours", "status"})


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(self, record: NewAttendanceRecord) -> AttendanceRecord:
        """Insert a record.

        Raises DuplicateRecordError when (employee_id, work_date) already exists;
        the check must be atomic in the store, not read-then-write.
        """

        raise NotImplementedError

    def update(self, attendance_id: int, fields: Mapping[str, Any], *, require_open: bool = False) -> bool:
        """Apply all fields in one statement.

        With require_open, only a record without check_out_time is touched.
        Returns False when no row was updated.
        """

        raise NotImplementedError

    def find(
        self,
        criteria: AttendanceFilter,
        *,
        limit: Optional[int] = None,
        newest_first: bool = False,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def find_with_profiles(self, criteria: AttendanceFilter) -> Sequence[AttendanceWithProfile]:
        raise NotImplementedError

    def delete(self, attendance_id: int) -> bool:
        """Administrative escape hatch, not part of the normal flow."""

        raise NotImplementedError
