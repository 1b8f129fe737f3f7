from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body, make_actor_required, to_jsonable
from ..container import Container
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


def _parse_status(value: str | None) -> AttendanceStatus | None:
    if not value or value == "all":
        return None
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown status {value!r}") from None


def register(app: Flask, container: Container) -> None:
    actor_required = make_actor_required(container.profile_service.resolve_actor)

    @app.route("/attendance/check-in", methods=["POST"], endpoint="check_in")
    @actor_required
    def check_in():
        record = container.attendance_service.check_in(g.actor)
        return jsonify(to_jsonable(record)), 201

    @app.route("/attendance/check-out", methods=["POST"], endpoint="check_out")
    @actor_required
    def check_out():
        work_date = json_body().get("work_date")
        record = container.attendance_service.check_out(
            g.actor,
            work_date=parse_iso_date(work_date) if work_date else None,
        )
        return jsonify(to_jsonable(record))

    @app.route("/attendance/today", methods=["GET"], endpoint="attendance_today")
    @actor_required
    def attendance_today():
        record = container.attendance_service.get_today_record(g.actor)
        return jsonify({"record": to_jsonable(record)})

    @app.route("/attendance/recent", methods=["GET"], endpoint="attendance_recent")
    @actor_required
    def attendance_recent():
        limit = request.args.get("limit", type=int)
        records = container.attendance_service.recent_records(g.actor, limit=limit)
        return jsonify({"records": to_jsonable(records)})

    @app.route("/attendance", methods=["GET"], endpoint="attendance_list")
    @actor_required
    def attendance_list():
        """All-attendance view for one day (managers see everyone, others only themselves)."""
        day_s = request.args.get("date")
        employee_id = request.args.get("employee_id")
        rows = container.attendance_service.list_for_day(
            g.actor,
            parse_iso_date(day_s) if day_s else container.clock().date(),
            employee_id=None if employee_id in (None, "", "all") else employee_id,
            status=_parse_status(request.args.get("status")),
            search=request.args.get("q"),
        )
        return jsonify({"rows": to_jsonable(rows)})

    @app.route("/attendance/<int:attendance_id>/status", methods=["PATCH"], endpoint="attendance_set_status")
    @actor_required
    def attendance_set_status(attendance_id: int):
        status = _parse_status(json_body().get("status"))
        if status is None:
            raise ValidationError("status is required")
        record = container.attendance_service.set_status(g.actor, attendance_id, status)
        return jsonify(to_jsonable(record))

    @app.route("/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="attendance_delete")
    @actor_required
    def attendance_delete(attendance_id: int):
        container.attendance_service.delete_record(g.actor, attendance_id)
        return "", 204
