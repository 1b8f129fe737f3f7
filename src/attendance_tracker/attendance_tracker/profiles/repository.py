from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Profile

# Fields a profile owner may change after creation.
UPDATABLE_PROFILE_FIELDS = frozenset({"name", "email", "department"})


class ProfileRepository(Protocol):
    """Repository interface for Profile.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Profile]:
        raise NotImplementedError

    def get_by_employee_code(self, employee_code: str) -> Optional[Profile]:
        raise NotImplementedError

    def list_profiles(self, *, role: Optional[Role] = None) -> Sequence[Profile]:
        raise NotImplementedError

    def create(self, profile: Profile) -> Profile:
        """Insert a profile. Raises DuplicateRecordError on email/code clashes."""

        raise NotImplementedError

    def update(self, profile_id: str, fields: Mapping[str, str]) -> bool:
        raise NotImplementedError
