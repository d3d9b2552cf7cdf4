from __future__ import annotations

from typing import Any, Mapping

from flask import jsonify, request

from ..core.exceptions import DomainError, ValidationError


def json_body() -> Mapping[str, Any]:
    """Parsed JSON object of the current request."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("El cuerpo de la petición debe ser un objeto JSON")
    return data


def error_response(kind: str, message: str, status: int):
    return jsonify({"error": message, "kind": kind}), status


def domain_error_response(exc: DomainError):
    return error_response(exc.kind, exc.message, exc.status_code)


def server_error_response(message: str):
    return error_response("internal_error", message, 500)
