from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.http import json_body, make_actor_required, to_jsonable
from ..container import Container
from ..core.constants import ACTOR_HEADER
from ..core.enums import Role
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    actor_required = make_actor_required(container.profile_service.resolve_actor)

    @app.route("/me", methods=["GET"], endpoint="me")
    @actor_required
    def me():
        return jsonify(to_jsonable(container.profile_service.get_profile(g.actor, g.actor.profile_id)))

    @app.route("/me", methods=["PATCH"], endpoint="me_update")
    @actor_required
    def me_update():
        body = json_body()
        profile = container.profile_service.update_profile(
            g.actor,
            g.actor.profile_id,
            name=body.get("name"),
            email=body.get("email"),
            department=body.get("department"),
        )
        return jsonify(to_jsonable(profile))

    @app.route("/profiles", methods=["POST"], endpoint="register_profile")
    def register_profile():
        """First sign-in: the gateway-authenticated identity creates its own profile."""
        body = json_body()
        try:
            role = Role(body.get("role", Role.EMPLOYEE.value))
        except ValueError:
            raise ValidationError(f"Unknown role {body.get('role')!r}") from None

        profile = container.profile_service.register(
            request.headers.get(ACTOR_HEADER, ""),
            name=body.get("name", ""),
            email=body.get("email", ""),
            role=role,
            employee_code=body.get("employee_code", ""),
            department=body.get("department", ""),
        )
        return jsonify(to_jsonable(profile)), 201

    @app.route("/employees", methods=["GET"], endpoint="employees")
    @actor_required
    def employees():
        return jsonify({"employees": to_jsonable(container.profile_service.list_employees(g.actor))})
