from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container
from .analytics import RecordFilter, filter_views, present_streak, summarize


def _parse_filter(args) -> RecordFilter:
    try:
        start = parse_iso_date(args["start_date"]) if args.get("start_date") else None
        end = parse_iso_date(args["end_date"]) if args.get("end_date") else None
    except ValueError:
        raise ValidationError("Dates must be YYYY-MM-DD")
    try:
        status = AttendanceStatus(args["status"]) if args.get("status") else None
    except ValueError:
        raise ValidationError(f"Unknown status: {args.get('status')!r}")
    try:
        min_hours = float(args["min_hours"]) if args.get("min_hours") else None
    except ValueError:
        raise ValidationError("min_hours must be a number")
    return RecordFilter(search=args.get("search", ""), start_date=start, end_date=end, status=status, min_hours=min_hours)


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service
    profiles = container.profile_service

    @app.route("/api/attendance/<employee_id>/check-in", methods=["POST"], endpoint="attendance_check_in")
    def check_in(employee_id: str):
        profiles.get(employee_id)
        view = attendance.check_in(employee_id)
        return jsonify({"success": True, "message": "Successfully checked in.", "record": view.to_dict()})

    @app.route("/api/attendance/<employee_id>/check-out", methods=["POST"], endpoint="attendance_check_out")
    def check_out(employee_id: str):
        profiles.get(employee_id)
        view = attendance.check_out(employee_id)
        return jsonify({"success": True, "message": "Successfully checked out.", "record": view.to_dict()})

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_all")
    def all_records():
        actor = profiles.get(request.args.get("actor_id", ""))
        if not actor.is_admin:
            raise AuthorizationError("Only administrators can view all attendance")

        views = filter_views(attendance.all_records(), _parse_filter(request.args))
        summary = summarize(views)
        return jsonify(
            {
                "success": True,
                "records": [v.to_dict() for v in views],
                "summary": summary.to_dict() if summary else None,
            }
        )

    @app.route("/api/attendance/<employee_id>", methods=["GET"], endpoint="attendance_for_user")
    def user_records(employee_id: str):
        profiles.get(employee_id)
        all_views = attendance.records_for(employee_id)
        views = filter_views(all_views, _parse_filter(request.args))
        summary = summarize(views)
        today = attendance.today_record(employee_id)
        return jsonify(
            {
                "success": True,
                "records": [v.to_dict() for v in views],
                "summary": summary.to_dict() if summary else None,
                "streak": present_streak(all_views),
                "today": today.to_dict() if today else None,
            }
        )
