from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.logging_setup import get_logger
from ..container import Container
from ..core.exceptions import NotFoundError, UnavailableError, ValidationError

logger = get_logger("scan")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/scan/<barcode>", methods=["GET"], endpoint="api_scan")
    def api_scan(barcode: str):
        mode = request.args.get("mode")
        try:
            result = container.scan_service.scan(barcode, mode)
        except NotFoundError as e:
            return jsonify({"ok": False, "error": str(e)}), 404
        except ValidationError as e:
            return jsonify({"ok": False, "error": str(e)}), 400
        except UnavailableError as e:
            logger.error("Scan rejected: %s", e)
            return jsonify({"ok": False, "error": "Attendance store not configured"}), 500
        except Exception:
            logger.exception("scan error")
            return jsonify({"ok": False, "error": "Internal error"}), 500

        return jsonify(result.to_dict())
