from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    profiles = container.profile_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def list_employees():
        found = profiles.search(
            request.args.get("q", ""),
            request.args.get("department", ""),
            request.args.get("role") or None,
        )
        return jsonify(
            {
                "success": True,
                "employees": [p.to_dict() for p in found],
                "departments": profiles.departments(),
            }
        )

    @app.route("/api/employees", methods=["POST"], endpoint="employees_add")
    def add_employee():
        data = json_body()
        actor_id = str(data.pop("actor_id", ""))
        profile = profiles.add_employee(actor_id, data)
        return jsonify({"success": True, "message": "Employee added", "employee": profile.to_dict()}), 201

    @app.route("/api/employees/<ref>", methods=["DELETE"], endpoint="employees_remove")
    def remove_employee(ref: str):
        removed = profiles.remove_employee(request.args.get("actor_id", ""), ref)
        return jsonify({"success": True, "message": "Employee removed", "employee": removed.to_dict()})

    @app.route("/api/employees/<ref>", methods=["GET"], endpoint="employees_get")
    def get_employee(ref: str):
        return jsonify({"success": True, "employee": profiles.get(ref).to_dict()})

    @app.route("/api/employees/<ref>", methods=["PATCH"], endpoint="employees_update")
    def update_employee(ref: str):
        data = json_body()
        actor_id = str(data.pop("actor_id", ""))
        result = profiles.update_profile(actor_id, ref, data)
        return jsonify(
            {
                "success": True,
                "message": result.message,
                "employee": result.profile.to_dict(),
                "changed_fields": result.changed_fields,
            }
        )

    @app.route("/api/employees/<ref>/audit", methods=["GET"], endpoint="employees_audit")
    def audit_log(ref: str):
        profile = profiles.get(ref)
        return jsonify({"success": True, "logs": profiles.audit_logs(profile.employee_id)})
