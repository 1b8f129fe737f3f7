"""Helpers shared by the Flask controllers."""

from __future__ import annotations

import dataclasses
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from functools import wraps
from typing import Any, Callable

from flask import g, request

from ..access.policy import Actor
from ..core.constants import ACTOR_HEADER
from ..core.exceptions import AuthorizationError, ValidationError


def to_jsonable(value: Any) -> Any:
    """Convert engine values (dataclasses, enums, dates, Decimals) into JSON types."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_jsonable(v) for v in value]
    return value


def json_body() -> dict:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("JSON body must be an object")
    return payload


def make_actor_required(resolve_actor: Callable[[str], Actor | None]):
    """Build a decorator that resolves the caller into g.actor.

    The identity comes from ACTOR_HEADER; authentication itself happens upstream.
    """

    def actor_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            profile_id = (request.headers.get(ACTOR_HEADER) or "").strip()
            if not profile_id:
                raise AuthorizationError("Missing caller identity")
            actor = resolve_actor(profile_id)
            if actor is None:
                raise AuthorizationError("Unknown caller")
            g.actor = actor
            return view(*args, **kwargs)

        return wrapper

    return actor_required
