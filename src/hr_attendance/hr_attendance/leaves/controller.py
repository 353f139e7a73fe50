from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body
from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    leaves = container.leave_service

    @app.route("/api/leaves", methods=["GET"], endpoint="leaves_list")
    def list_leaves():
        employee_id = request.args.get("employee_id")
        status_arg = request.args.get("status")
        try:
            status = LeaveStatus(status_arg) if status_arg else None
        except ValueError:
            raise ValidationError(f"Unknown status: {status_arg!r}")

        items = leaves.list_for(employee_id) if employee_id else leaves.list_all()
        if status:
            items = [r for r in items if r.status == status]
        return jsonify({"success": True, "leaves": [r.to_dict() for r in items]})

    @app.route("/api/leaves", methods=["POST"], endpoint="leaves_apply")
    def apply_leave():
        data = json_body()
        try:
            start = parse_iso_date(str(data.get("start_date", "")))
            end = parse_iso_date(str(data.get("end_date", "")))
        except ValueError:
            raise ValidationError("Dates must be YYYY-MM-DD")

        req = leaves.apply(
            str(data.get("employee_id", "")),
            leave_type=data.get("type", ""),
            start_date=start,
            end_date=end,
            reason=str(data.get("reason", "")),
        )
        return jsonify({"success": True, "message": "Leave request submitted", "leave": req.to_dict()}), 201

    @app.route("/api/leaves/<request_id>/approve", methods=["POST"], endpoint="leaves_approve")
    def approve_leave(request_id: str):
        data = json_body()
        req = leaves.approve(str(data.get("actor_id", "")), request_id, str(data.get("comment", "")))
        return jsonify({"success": True, "message": "Leave approved", "leave": req.to_dict()})

    @app.route("/api/leaves/<request_id>/reject", methods=["POST"], endpoint="leaves_reject")
    def reject_leave(request_id: str):
        data = json_body()
        req = leaves.reject(str(data.get("actor_id", "")), request_id, str(data.get("comment", "")))
        return jsonify({"success": True, "message": "Leave rejected", "leave": req.to_dict()})

    @app.route("/api/leaves/<employee_id>/balance", methods=["GET"], endpoint="leaves_balance")
    def leave_balance(employee_id: str):
        container.profile_service.get(employee_id)
        return jsonify(
            {
                "success": True,
                "balance": leaves.balance(employee_id),
                "breakdown": leaves.breakdown(employee_id),
                "by_type": leaves.balances(employee_id).to_dict(),
                "pending": leaves.pending_count(employee_id),
            }
        )
