from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.logging_setup import get_logger
from ..container import Container
from ..core.exceptions import AuthenticationError

logger = get_logger("auth")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def api_login():
        data = request.get_json(silent=True) or {}
        username = str(data.get("username", ""))
        password = str(data.get("password", ""))

        try:
            role = container.auth_service.authenticate(username, password)
        except AuthenticationError as e:
            logger.info("Rejected login for %r", username)
            return jsonify({"success": False, "message": str(e)})

        return jsonify({"success": True, "role": role.value})
