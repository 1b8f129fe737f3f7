from __future__ import annotations

from datetime import date

from flask import Flask, g, jsonify, request

from ..common.datetime_utils import month_bounds, parse_iso_date, parse_year_month, shift_month
from ..common.http import make_actor_required, to_jsonable
from ..container import Container


def register(app: Flask, container: Container) -> None:
    actor_required = make_actor_required(container.profile_service.resolve_actor)

    def _month_arg() -> tuple[int, int]:
        value = request.args.get("month")
        if not value:
            today = container.clock().date()
            return today.year, today.month
        return parse_year_month(value)

    def _range_args() -> tuple[date, date]:
        today = container.clock().date()
        start_default, _ = month_bounds(today.year, today.month)
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        start = parse_iso_date(start_s) if start_s else start_default
        end = parse_iso_date(end_s) if end_s else today
        return start, end

    def _employee_arg() -> str | None:
        value = request.args.get("employee_id")
        return None if value in (None, "", "all") else value

    def _month_page(view, year: int, month: int) -> dict:
        payload = to_jsonable(view)
        for key, delta in (("prev_month", -1), ("next_month", 1)):
            y, m = shift_month(year, month, delta)
            payload[key] = f"{y:04d}-{m:02d}"
        return payload

    @app.route("/dashboard/employee", methods=["GET"], endpoint="employee_dashboard")
    @actor_required
    def employee_dashboard():
        return jsonify(to_jsonable(container.report_service.employee_dashboard(g.actor)))

    @app.route("/dashboard/manager", methods=["GET"], endpoint="manager_dashboard")
    @actor_required
    def manager_dashboard():
        return jsonify(to_jsonable(container.report_service.manager_dashboard(g.actor)))

    @app.route("/calendar/team", methods=["GET"], endpoint="team_calendar")
    @actor_required
    def team_calendar():
        year, month = _month_arg()
        return jsonify(_month_page(container.report_service.team_calendar(g.actor, year, month), year, month))

    @app.route("/attendance/history", methods=["GET"], endpoint="attendance_history")
    @actor_required
    def attendance_history():
        year, month = _month_arg()
        return jsonify(_month_page(container.report_service.employee_history(g.actor, year, month), year, month))

    @app.route("/reports", methods=["GET"], endpoint="report")
    @actor_required
    def report():
        start, end = _range_args()
        data = container.report_service.build_report(g.actor, start=start, end=end, employee_id=_employee_arg())
        return jsonify(to_jsonable(data))

    @app.route("/reports.csv", methods=["GET"], endpoint="report_csv")
    @actor_required
    def report_csv():
        start, end = _range_args()
        filename, text = container.report_service.export_csv(
            g.actor, start=start, end=end, employee_id=_employee_arg()
        )
        return app.response_class(
            text.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
