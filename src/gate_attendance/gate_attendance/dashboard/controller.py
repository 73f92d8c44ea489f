from __future__ import annotations

from flask import Flask, jsonify

from ..common.logging_setup import get_logger
from ..container import Container

logger = get_logger("dashboard")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    def api_dashboard():
        try:
            stats = container.dashboard_service.today_stats()
        except Exception:
            logger.exception("Error in /api/dashboard")
            return jsonify({"error": "Dashboard error"}), 500
        return jsonify({section: s.to_dict() for section, s in stats.items()})
