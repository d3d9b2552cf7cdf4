from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.responses import domain_error_response, json_body, server_error_response
from ..common.validators import require_id, require_present
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/usuarios", methods=["GET"], endpoint="list_users")
    def list_users():
        try:
            users = container.user_service.list_users()
            return jsonify([u.to_dict() for u in users])
        except Exception:
            logger.exception("Listing users failed")
            return server_error_response("Error al obtener usuarios")

    @app.route("/usuarios", methods=["POST"], endpoint="add_user")
    def add_user():
        try:
            data = json_body()
            user = container.user_service.create_user(
                name=require_present(data, "nombre"),
                office=require_present(data, "oficina"),
            )
            return jsonify(
                {
                    "id": user.user_id,
                    "nombre": user.name,
                    "oficina": user.office,
                    "codigo": user.code,
                }
            )
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Creating user failed")
            return server_error_response("Error al agregar usuario")

    @app.route("/usuarios/<int:id_usuarios>", methods=["PUT"], endpoint="update_user")
    def update_user(id_usuarios: int):
        try:
            data = json_body()
            container.user_service.update_user(
                require_id(id_usuarios),
                name=require_present(data, "nombre"),
                office=require_present(data, "oficina"),
            )
            return jsonify({"mensaje": "Usuario actualizado correctamente"})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Updating user %s failed", id_usuarios)
            return server_error_response("Error al actualizar usuario")

    @app.route("/usuarios/<int:id_usuarios>", methods=["DELETE"], endpoint="delete_user")
    def delete_user(id_usuarios: int):
        try:
            container.user_service.delete_user(require_id(id_usuarios))
            return jsonify({"mensaje": "Usuario eliminado correctamente"})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Deleting user %s failed", id_usuarios)
            return server_error_response("Error al eliminar usuario")

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        try:
            data = json_body()
            user = container.auth_service.login(str(data.get("codigo") or ""))
            return jsonify(user.to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Login failed")
            return server_error_response("Error al iniciar sesión")
