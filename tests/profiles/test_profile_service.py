import pytest

from src.attendance_tracker.attendance_tracker.core.enums import Role
from src.attendance_tracker.attendance_tracker.core.exceptions import (
    AuthorizationError,
    RecordNotFoundError,
    ValidationError,
)


def test_resolve_actor(container, manager):
    assert container.profile_service.resolve_actor("m-1") == manager
    assert container.profile_service.resolve_actor("ghost") is None


def test_register_creates_own_profile(container, profiles_repo):
    created = container.profile_service.register(
        "e-3",
        name="  Sam Smith ",
        email="Sam@Example.com",
        role=Role.EMPLOYEE,
        employee_code="EMP003",
        department=" Sales ",
    )

    assert created.name == "Sam Smith"
    assert created.email == "sam@example.com"
    assert created.department == "Sales"
    assert profiles_repo.get_by_id("e-3") == created


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(name="", email="a@example.com", employee_code="X1"),
        dict(name="A", email="not-an-email", employee_code="X1"),
        dict(name="A", email="a@example.com", employee_code="  "),
        dict(name="A", email="eli@example.com", employee_code="X1"),
        dict(name="A", email="a@example.com", employee_code="EMP001"),
    ],
)
def test_register_rejects_invalid_or_taken_values(container, kwargs):
    with pytest.raises(ValidationError):
        container.profile_service.register("e-9", role=Role.EMPLOYEE, **kwargs)


def test_register_requires_identity(container):
    with pytest.raises(ValidationError):
        container.profile_service.register(
            "", name="A", email="a@example.com", role=Role.EMPLOYEE, employee_code="X1"
        )


def test_update_own_profile(container, employee):
    updated = container.profile_service.update_profile(employee, "e-1", department="Platform")

    assert updated.department == "Platform"
    assert updated.name == "Eli Employee"


def test_update_without_fields_returns_current(container, employee, employee_profile):
    assert container.profile_service.update_profile(employee, "e-1") == employee_profile


def test_update_rejects_email_of_someone_else(container, employee):
    with pytest.raises(ValidationError):
        container.profile_service.update_profile(employee, "e-1", email="nora@example.com")


def test_manager_cannot_update_other_profile(container, manager):
    with pytest.raises(AuthorizationError):
        container.profile_service.update_profile(manager, "e-1", name="Renamed")


def test_employee_cannot_read_other_profile(container, employee):
    with pytest.raises(AuthorizationError):
        container.profile_service.get_profile(employee, "e-2")


def test_manager_reads_any_profile_but_missing_is_not_found(container, manager):
    assert container.profile_service.get_profile(manager, "e-2").employee_code == "EMP002"
    with pytest.raises(RecordNotFoundError):
        container.profile_service.get_profile(manager, "ghost")


def test_list_employees_is_scoped(container, manager, employee):
    assert [p.profile_id for p in container.profile_service.list_employees(manager)] == ["e-1", "e-2"]
    assert [p.profile_id for p in container.profile_service.list_employees(employee)] == ["e-1"]
