from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of a profile, used by the access policy."""

    EMPLOYEE = "employee"
    MANAGER = "manager"


class AttendanceStatus(str, Enum):
    """Wire-visible attendance status stored in the database."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half-day"


class Action(str, Enum):
    READ = "read"
    WRITE = "write"


class ResourceKind(str, Enum):
    PROFILE = "profile"
    ATTENDANCE = "attendance"
