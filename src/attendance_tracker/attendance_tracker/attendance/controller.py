from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.responses import domain_error_response, json_body, server_error_response
from ..common.validators import require_id
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/asistencia/ingreso", methods=["POST"], endpoint="check_in")
    def check_in():
        try:
            user_id = require_id(json_body().get("id_usuarios"))
            record = container.attendance_service.check_in(user_id)
            return jsonify({"mensaje": "Ingreso registrado", "fecha_entrada": record.check_in_at})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Check-in failed")
            return server_error_response("Error al registrar ingreso")

    @app.route("/asistencia/salida", methods=["POST"], endpoint="check_out")
    def check_out():
        try:
            user_id = require_id(json_body().get("id_usuarios"))
            record = container.attendance_service.check_out(user_id)
            return jsonify({"mensaje": "Salida registrada", "fecha_salida": record.check_out_at})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Check-out failed")
            return server_error_response("Error al registrar salida")

    @app.route("/asistencia/<int:id_usuarios>", methods=["GET"], endpoint="attendance_history")
    def attendance_history(id_usuarios: int):
        try:
            records = container.attendance_service.history(require_id(id_usuarios))
            return jsonify([r.to_dict() for r in records])
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Loading attendance history for %s failed", id_usuarios)
            return server_error_response("Error al obtener asistencias")
