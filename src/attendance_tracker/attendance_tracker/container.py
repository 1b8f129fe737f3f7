from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from .access.scoped_store import ScopedAttendanceStore, ScopedProfileStore
from .attendance.factory import CheckInStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_LATE_CUTOFF_HOUR, DEFAULT_RECENT_HISTORY_LIMIT
from .database.connection import DBConfig, DatabaseConnection
from .profiles.mysql_profile_repository import MySQLProfileRepository
from .profiles.repository import ProfileRepository
from .profiles.service import ProfileService
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    profiles_repo: ProfileRepository
    attendance_repo: AttendanceRepository

    profile_service: ProfileService
    attendance_service: AttendanceService
    report_service: ReportService

    clock: Callable[[], datetime] = now_local


def wire_container(
    *,
    profiles_repo: ProfileRepository,
    attendance_repo: AttendanceRepository,
    late_cutoff_hour: int = DEFAULT_LATE_CUTOFF_HOUR,
    recent_limit: int = DEFAULT_RECENT_HISTORY_LIMIT,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    """Assemble services over any repository implementation."""
    attendance_store = ScopedAttendanceStore(attendance_repo)
    profile_store = ScopedProfileStore(profiles_repo)

    return Container(
        profiles_repo=profiles_repo,
        attendance_repo=attendance_repo,
        profile_service=ProfileService(profiles_repo, profile_store),
        attendance_service=AttendanceService(
            attendance_store,
            strategy_factory=CheckInStrategyFactory(cutoff_hour=late_cutoff_hour),
            clock=clock,
            recent_limit=recent_limit,
        ),
        report_service=ReportService(
            attendance_store,
            profile_store,
            clock=clock,
            recent_limit=recent_limit,
        ),
        clock=clock,
    )


def build_container(
    *,
    db_config: dict,
    late_cutoff_hour: int = DEFAULT_LATE_CUTOFF_HOUR,
    recent_limit: int = DEFAULT_RECENT_HISTORY_LIMIT,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_container(
        profiles_repo=MySQLProfileRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        late_cutoff_hour=late_cutoff_hour,
        recent_limit=recent_limit,
    )
