from __future__ import annotations

from datetime import datetime

import pytest

from src.attendance_tracker.attendance_tracker.access.policy import Actor
from src.attendance_tracker.attendance_tracker.container import wire_container
from src.attendance_tracker.attendance_tracker.core.enums import Role
from src.attendance_tracker.attendance_tracker.profiles.model import Profile

from tests.fakes import InMemoryAttendance, InMemoryProfiles


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 12, 8, 30, 0)


@pytest.fixture
def manager_profile() -> Profile:
    return Profile(
        profile_id="m-1",
        name="Maria Manager",
        email="maria@example.com",
        role=Role.MANAGER,
        employee_code="MGR001",
        department="Operations",
    )


@pytest.fixture
def employee_profile() -> Profile:
    return Profile(
        profile_id="e-1",
        name="Eli Employee",
        email="eli@example.com",
        role=Role.EMPLOYEE,
        employee_code="EMP001",
        department="Engineering",
    )


@pytest.fixture
def other_employee_profile() -> Profile:
    return Profile(
        profile_id="e-2",
        name="Nora Newhire",
        email="nora@example.com",
        role=Role.EMPLOYEE,
        employee_code="EMP002",
        department="",
    )


@pytest.fixture
def employee(employee_profile) -> Actor:
    return Actor.from_profile(employee_profile)


@pytest.fixture
def other_employee(other_employee_profile) -> Actor:
    return Actor.from_profile(other_employee_profile)


@pytest.fixture
def manager(manager_profile) -> Actor:
    return Actor.from_profile(manager_profile)


@pytest.fixture
def profiles_repo(manager_profile, employee_profile, other_employee_profile) -> InMemoryProfiles:
    return InMemoryProfiles([manager_profile, employee_profile, other_employee_profile])


@pytest.fixture
def attendance_repo(profiles_repo) -> InMemoryAttendance:
    return InMemoryAttendance(profiles_repo)


@pytest.fixture
def container(profiles_repo, attendance_repo, fixed_now):
    return wire_container(
        profiles_repo=profiles_repo,
        attendance_repo=attendance_repo,
        clock=lambda: fixed_now,
    )
