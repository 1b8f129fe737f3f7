from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Profile
from .repository import UPDATABLE_PROFILE_FIELDS, ProfileRepository

_COLUMNS = "profile_id, name, email, role, employee_code, department, created_at"


def _row_to_profile(r: dict) -> Profile:
    return Profile(
        profile_id=str(r["profile_id"]),
        name=r["name"],
        email=r["email"],
        role=Role(r["role"]),
        employee_code=r["employee_code"],
        department=r.get("department") or "",
        created_at=r.get("created_at"),
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, column: str, value: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE {column}=%s", (value,))
            r = fetchone(cur)
            return _row_to_profile(r) if r else None

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        return self._get_one("profile_id", profile_id)

    def get_by_email(self, email: str) -> Optional[Profile]:
        return self._get_one("email", email)

    def get_by_employee_code(self, employee_code: str) -> Optional[Profile]:
        return self._get_one("employee_code", employee_code)

    def list_profiles(self, *, role: Optional[Role] = None) -> Sequence[Profile]:
        sql = f"SELECT {_COLUMNS} FROM profiles"
        params: tuple = ()
        if role is not None:
            sql += " WHERE role=%s"
            params = (role.value,)
        sql += " ORDER BY name ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_row_to_profile(r) for r in fetchall(cur)]

    def create(self, profile: Profile) -> Profile:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO profiles(profile_id, name, email, role, employee_code, department)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    profile.profile_id,
                    profile.name,
                    profile.email,
                    profile.role.value,
                    profile.employee_code,
                    profile.department or "",
                ),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE profile_id=%s", (profile.profile_id,))
            return _row_to_profile(fetchone(cur))

    def update(self, profile_id: str, fields: Mapping[str, str]) -> bool:
        unknown = set(fields) - UPDATABLE_PROFILE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported profile columns: {sorted(unknown)}")
        if not fields:
            return False

        columns = sorted(fields)
        assignments = ", ".join(f"{col}=%s" for col in columns)
        params = [fields[col] for col in columns] + [profile_id]

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE profiles SET {assignments} WHERE profile_id=%s", tuple(params))
            return cur.rowcount > 0
