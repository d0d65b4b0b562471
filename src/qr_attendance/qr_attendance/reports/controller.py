from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..auth.guards import admin_required, is_admin
from ..container import Container
from ..core.exceptions import ValidationError
from .exporters import matrix_xlsx, reconciliation_xlsx

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _xlsx_response(payload: bytes, *, filename: str):
        return send_file(io.BytesIO(payload), mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=filename)

    @app.route("/api/roster-status", methods=["GET"], endpoint="api_roster_status")
    @admin_required
    def api_roster_status():
        rec = container.report_service.roster_status(request.args.get("code"))
        return jsonify(rec.to_dict())

    @app.route("/api/export-roster", methods=["GET"], endpoint="api_export_roster")
    @admin_required
    def api_export_roster():
        code = (request.args.get("code") or "").strip()
        if not code:
            return jsonify({"message": "code is required"}), 400
        rec = container.report_service.roster_status(code)
        return _xlsx_response(reconciliation_xlsx(rec), filename=f"roster_{code}.xlsx")

    @app.route("/api/matrix", methods=["GET"], endpoint="api_matrix")
    @admin_required
    def api_matrix():
        matrix = container.report_service.course_matrix(request.args.get("course"))
        return jsonify(matrix.to_dict())

    @app.route("/api/export-matrix", methods=["GET"], endpoint="api_export_matrix")
    @admin_required
    def api_export_matrix():
        course = (request.args.get("course") or "").strip()
        if not course:
            return jsonify({"message": "course is required"}), 400
        matrix = container.report_service.course_matrix(course)
        return _xlsx_response(matrix_xlsx(matrix), filename=f"matrix_{matrix.course}.xlsx")

    @app.route("/api/admin/roster", methods=["POST"], endpoint="api_admin_roster")
    @admin_required
    def api_admin_roster():
        upload = request.files.get("file")
        text = upload.read().decode("utf-8-sig") if upload else request.get_data(as_text=True)
        try:
            count = container.roster_service.import_csv(text, is_admin=is_admin())
        except ValidationError as e:
            return jsonify({"ok": False, "message": str(e)}), 400
        return jsonify({"ok": True, "count": count})
