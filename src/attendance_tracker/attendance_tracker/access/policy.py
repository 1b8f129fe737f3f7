"""Access rules for profile and attendance rows.

An actor may read and write its own rows. A manager may additionally read
every profile and attendance row. Nobody writes another actor's rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.enums import Action, ResourceKind, Role
from ..core.exceptions import AuthorizationError
from ..profiles.model import Profile


@dataclass(frozen=True)
class Actor:
    """Who is calling. Passed explicitly into every service call."""

    profile_id: str
    role: Role

    @classmethod
    def from_profile(cls, profile: Profile) -> "Actor":
        return cls(profile_id=profile.profile_id, role=profile.role)

    @property
    def is_manager(self) -> bool:
        return self.role == Role.MANAGER


@dataclass(frozen=True)
class Resource:
    kind: ResourceKind
    owner_id: str


class Decision(str, Enum):
    ALLOW = "allow"
    DENY = "deny"


def evaluate(actor: Actor, resource: Resource, action: Action) -> Decision:
    if resource.owner_id == actor.profile_id:
        return Decision.ALLOW
    if action == Action.READ and actor.is_manager:
        return Decision.ALLOW
    return Decision.DENY


def require(actor: Actor, resource: Resource, action: Action) -> None:
    if evaluate(actor, resource, action) is Decision.DENY:
        raise AuthorizationError(
            f"{actor.role.value} {actor.profile_id} may not {action.value} "
            f"{resource.kind.value} rows of {resource.owner_id}"
        )


def scoped_employee_filter(actor: Actor, requested_employee_id: Optional[str]) -> Optional[str]:
    """Narrow a read filter to what the actor may see.

    Managers keep the requested filter (None = everyone). Anyone else is
    pinned to their own rows; asking for someone else's rows is denied.
    """
    if actor.is_manager:
        return requested_employee_id
    if requested_employee_id is None or requested_employee_id == actor.profile_id:
        return actor.profile_id
    raise AuthorizationError(f"{actor.profile_id} may only read their own attendance")
