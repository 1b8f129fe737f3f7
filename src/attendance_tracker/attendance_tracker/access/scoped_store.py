"""Store adapters that evaluate the access policy before touching a repository."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..attendance.model import AttendanceFilter, AttendanceRecord, AttendanceWithProfile, NewAttendanceRecord
from ..attendance.repository import UPDATABLE_ATTENDANCE_FIELDS, AttendanceRepository
from ..core.enums import Action, ResourceKind, Role
from ..core.exceptions import ValidationError
from ..profiles.model import Profile
from ..profiles.repository import UPDATABLE_PROFILE_FIELDS, ProfileRepository
from .policy import Actor, Resource, require, scoped_employee_filter


def _attendance_of(employee_id: str) -> Resource:
    return Resource(kind=ResourceKind.ATTENDANCE, owner_id=employee_id)


def _profile_of(profile_id: str) -> Resource:
    return Resource(kind=ResourceKind.PROFILE, owner_id=profile_id)


class ScopedAttendanceStore:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def get_for_employee_and_date(self, actor: Actor, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        require(actor, _attendance_of(employee_id), Action.READ)
        return self._attendance.get_for_employee_and_date(employee_id, work_date)

    def get_by_id(self, actor: Actor, attendance_id: int) -> Optional[AttendanceRecord]:
        record = self._attendance.get_by_id(attendance_id)
        if record is None:
            return None
        require(actor, _attendance_of(record.employee_id), Action.READ)
        return record

    def create(self, actor: Actor, record: NewAttendanceRecord) -> AttendanceRecord:
        require(actor, _attendance_of(record.employee_id), Action.WRITE)
        return self._attendance.create(record)

    def update(
        self,
        actor: Actor,
        record: AttendanceRecord,
        fields: Mapping[str, Any],
        *,
        require_open: bool = False,
    ) -> bool:
        require(actor, _attendance_of(record.employee_id), Action.WRITE)
        unknown = set(fields) - UPDATABLE_ATTENDANCE_FIELDS
        if unknown:
            raise ValidationError(f"Attendance fields not updatable: {', '.join(sorted(unknown))}")
        return self._attendance.update(record.attendance_id, fields, require_open=require_open)

    def delete(self, actor: Actor, record: AttendanceRecord) -> bool:
        require(actor, _attendance_of(record.employee_id), Action.WRITE)
        return self._attendance.delete(record.attendance_id)

    def find(
        self,
        actor: Actor,
        criteria: AttendanceFilter,
        *,
        limit: Optional[int] = None,
        newest_first: bool = False,
    ) -> Sequence[AttendanceRecord]:
        scoped = replace(criteria, employee_id=scoped_employee_filter(actor, criteria.employee_id))
        return self._attendance.find(scoped, limit=limit, newest_first=newest_first)

    def find_with_profiles(self, actor: Actor, criteria: AttendanceFilter) -> Sequence[AttendanceWithProfile]:
        scoped = replace(criteria, employee_id=scoped_employee_filter(actor, criteria.employee_id))
        return self._attendance.find_with_profiles(scoped)


class ScopedProfileStore:
    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def get(self, actor: Actor, profile_id: str) -> Optional[Profile]:
        require(actor, _profile_of(profile_id), Action.READ)
        return self._profiles.get_by_id(profile_id)

    def list_profiles(self, actor: Actor, *, role: Optional[Role] = None) -> Sequence[Profile]:
        if actor.is_manager:
            return self._profiles.list_profiles(role=role)
        own = self._profiles.get_by_id(actor.profile_id)
        if own is None or (role is not None and own.role != role):
            return []
        return [own]

    def create(self, actor: Actor, profile: Profile) -> Profile:
        require(actor, _profile_of(profile.profile_id), Action.WRITE)
        return self._profiles.create(profile)

    def update(self, actor: Actor, profile_id: str, fields: Mapping[str, str]) -> bool:
        require(actor, _profile_of(profile_id), Action.WRITE)
        unknown = set(fields) - UPDATABLE_PROFILE_FIELDS
        if unknown:
            raise ValidationError(f"Profile fields not updatable: {', '.join(sorted(unknown))}")
        return self._profiles.update(profile_id, fields)
