from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..access.policy import Actor
from ..access.scoped_store import ScopedProfileStore
from ..common.validators import require_email, require_non_empty
from ..core.enums import Role
from ..core.exceptions import DuplicateRecordError, RecordNotFoundError, ValidationError
from .model import Profile
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """Use case: read and maintain profiles.

    Unscoped lookups (resolve_actor, uniqueness checks) go to the repository
    directly; everything done on behalf of an actor goes through the scoped store.
    """

    def __init__(self, profiles: ProfileRepository, store: ScopedProfileStore):
        self._profiles = profiles
        self._store = store

    def resolve_actor(self, profile_id: str) -> Optional[Actor]:
        """Map an authenticated identity to an Actor, or None if unknown."""
        profile = self._profiles.get_by_id(profile_id)
        return Actor.from_profile(profile) if profile else None

    def get_profile(self, actor: Actor, profile_id: str) -> Profile:
        profile = self._store.get(actor, profile_id)
        if not profile:
            raise RecordNotFoundError(f"Profile {profile_id} not found")
        return profile

    def list_employees(self, actor: Actor) -> Sequence[Profile]:
        return self._store.list_profiles(actor, role=Role.EMPLOYEE)

    def list_profiles(self, actor: Actor) -> Sequence[Profile]:
        return self._store.list_profiles(actor)

    def register(
        self,
        actor_id: str,
        *,
        name: str,
        email: str,
        role: Role,
        employee_code: str,
        department: str = "",
    ) -> Profile:
        """Create the profile of a freshly authenticated identity (self-service only)."""
        profile = Profile(
            profile_id=require_non_empty(actor_id, "Profile id"),
            name=require_non_empty(name, "Name"),
            email=require_email(email),
            role=role,
            employee_code=require_non_empty(employee_code, "Employee code"),
            department=(department or "").strip(),
        )

        if self._profiles.get_by_email(profile.email):
            raise ValidationError("Email already in use")
        if self._profiles.get_by_employee_code(profile.employee_code):
            raise ValidationError("Employee code already in use")

        try:
            created = self._store.create(Actor(profile_id=profile.profile_id, role=role), profile)
        except DuplicateRecordError:
            raise ValidationError("Email or employee code already in use") from None
        logger.info("Profile %s registered as %s", created.profile_id, created.role.value)
        return created

    def update_profile(
        self,
        actor: Actor,
        profile_id: str,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        department: Optional[str] = None,
    ) -> Profile:
        current = self.get_profile(actor, profile_id)

        fields: dict[str, str] = {}
        if name is not None:
            fields["name"] = require_non_empty(name, "Name")
        if email is not None:
            fields["email"] = require_email(email)
            other = self._profiles.get_by_email(fields["email"])
            if other and other.profile_id != profile_id:
                raise ValidationError("Email already in use")
        if department is not None:
            fields["department"] = department.strip()

        if not fields:
            return current

        try:
            self._store.update(actor, profile_id, fields)
        except DuplicateRecordError:
            raise ValidationError("Email already in use") from None
        logger.info("Profile %s updated (%s)", profile_id, ", ".join(sorted(fields)))
        return self.get_profile(actor, profile_id)
