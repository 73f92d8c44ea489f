from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.logging_setup import get_logger
from ..container import Container
from .model import REPORT_FIELDS

logger = get_logger("reports")


def register(app: Flask, container: Container) -> None:
    def _query_from_args():
        return container.report_service.build_query(
            report_type=request.args.get("reportType"),
            section=request.args.get("section"),
            start_date=request.args.get("startDate"),
            end_date=request.args.get("endDate"),
        )

    @app.route("/api/reports", methods=["GET"], endpoint="api_reports")
    def api_reports():
        try:
            rows = container.report_service.build_report(_query_from_args())
        except Exception:
            logger.exception("Error in /api/reports")
            return jsonify({"success": False, "message": "Reports error"}), 500
        return jsonify({"success": True, "data": [r.to_dict() for r in rows]})

    @app.route("/api/reports/export", methods=["GET"], endpoint="api_reports_export")
    def api_reports_export():
        query = _query_from_args()
        try:
            rows = container.report_service.build_report(query)
        except Exception:
            logger.exception("Error in /api/reports/export")
            return jsonify({"success": False, "message": "Reports error"}), 500

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row.to_dict())

        kind = query.report_type.value if query.report_type else "report"
        filename = f"{kind}_{query.start.isoformat()}_{query.end.isoformat()}.csv"
        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
