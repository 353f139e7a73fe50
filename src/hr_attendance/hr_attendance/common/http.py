from __future__ import annotations

from typing import Tuple

from flask import Response, jsonify, request

from ..core.exceptions import (
    AttendanceError,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)


def status_for(error: DomainError) -> int:
    if isinstance(error, AttendanceError):
        return 409
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, AuthorizationError):
        return 403
    if isinstance(error, ValidationError):
        return 400
    return 400


def error_response(error: DomainError) -> Tuple[Response, int]:
    return jsonify({"success": False, "message": str(error)}), status_for(error)


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
