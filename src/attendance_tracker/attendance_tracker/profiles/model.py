from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Profile:
    """Domain entity: one person's identity and role.

    Note: Plain data object, no DB access code here.
    """

    profile_id: str
    name: str
    email: str
    role: Role
    employee_code: str
    department: str = ""
    created_at: Optional[datetime] = None

    @property
    def is_employee(self) -> bool:
        return self.role == Role.EMPLOYEE
