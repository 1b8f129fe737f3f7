from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import AttendanceStatus, Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_decimal
from ..profiles.model import Profile
from .model import AttendanceFilter, AttendanceRecord, AttendanceWithProfile, NewAttendanceRecord
from .repository import UPDATABLE_ATTENDANCE_FIELDS, AttendanceRepository

_RECORD_COLUMNS = """
    ar.attendance_id, ar.employee_id, ar.work_date, ar.check_in_time, ar.check_out_time,
    ar.status, ar.total_hours, ar.created_at
"""


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        check_in_time=r.get("check_in_time"),
        check_out_time=r.get("check_out_time"),
        status=AttendanceStatus(r["status"]),
        total_hours=normalize_decimal(r.get("total_hours")),
        created_at=r.get("created_at"),
    )


def _where(criteria: AttendanceFilter) -> tuple[str, list[object]]:
    clauses: list[str] = []
    params: list[object] = []

    if criteria.employee_id is not None:
        clauses.append("ar.employee_id=%s")
        params.append(criteria.employee_id)
    if criteria.work_date is not None:
        clauses.append("ar.work_date=%s")
        params.append(criteria.work_date)
    if criteria.start_date is not None:
        clauses.append("ar.work_date>=%s")
        params.append(criteria.start_date)
    if criteria.end_date is not None:
        clauses.append("ar.work_date<=%s")
        params.append(criteria.end_date)
    if criteria.status is not None:
        clauses.append("ar.status=%s")
        params.append(criteria.status.value)

    return (" AND ".join(clauses) or "1=1"), params


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_RECORD_COLUMNS} FROM attendance_records ar WHERE ar.attendance_id=%s",
                (int(attendance_id),),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance_records ar
                WHERE ar.employee_id=%s AND ar.work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def create(self, record: NewAttendanceRecord) -> AttendanceRecord:
        # UNIQUE(employee_id, work_date) makes concurrent check-ins fail atomically.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(employee_id, work_date, check_in_time, status)
                VALUES(%s,%s,%s,%s)
                """,
                (record.employee_id, record.work_date, record.check_in_time, record.status.value),
            )
            attendance_id = int(cur.lastrowid)
            cur.execute(
                f"SELECT {_RECORD_COLUMNS} FROM attendance_records ar WHERE ar.attendance_id=%s",
                (attendance_id,),
            )
            return _row_to_record(fetchone(cur))

    def update(self, attendance_id: int, fields: Mapping[str, Any], *, require_open: bool = False) -> bool:
        unknown = set(fields) - UPDATABLE_ATTENDANCE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported attendance columns: {sorted(unknown)}")
        if not fields:
            return False

        columns = sorted(fields)
        assignments = ", ".join(f"{col}=%s" for col in columns)
        params: list[object] = [
            fields[col].value if isinstance(fields[col], AttendanceStatus) else fields[col]
            for col in columns
        ]
        params.append(int(attendance_id))
        guard = " AND check_out_time IS NULL" if require_open else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE attendance_records SET {assignments} WHERE attendance_id=%s{guard}",
                tuple(params),
            )
            return cur.rowcount > 0

    def find(
        self,
        criteria: AttendanceFilter,
        *,
        limit: Optional[int] = None,
        newest_first: bool = False,
    ) -> Sequence[AttendanceRecord]:
        where, params = _where(criteria)
        order = "DESC" if newest_first else "ASC"
        sql = f"""
            SELECT {_RECORD_COLUMNS}
            FROM attendance_records ar
            WHERE {where}
            ORDER BY ar.work_date {order}, ar.attendance_id {order}
        """
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_row_to_record(r) for r in fetchall(cur)]

    def find_with_profiles(self, criteria: AttendanceFilter) -> Sequence[AttendanceWithProfile]:
        where, params = _where(criteria)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    {_RECORD_COLUMNS},
                    p.profile_id, p.name, p.email, p.role, p.employee_code, p.department,
                    p.created_at AS profile_created_at
                FROM attendance_records ar
                JOIN profiles p ON p.profile_id = ar.employee_id
                WHERE {where}
                ORDER BY ar.work_date DESC, p.name ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

            return [
                AttendanceWithProfile(
                    record=_row_to_record(r),
                    profile=Profile(
                        profile_id=str(r["profile_id"]),
                        name=r["name"],
                        email=r["email"],
                        role=Role(r["role"]),
                        employee_code=r["employee_code"],
                        department=r.get("department") or "",
                        created_at=r.get("profile_created_at"),
                    ),
                )
                for r in rows
            ]

    def delete(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            return cur.rowcount > 0
