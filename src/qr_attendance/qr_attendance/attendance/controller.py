from __future__ import annotations

import io

from flask import Flask, jsonify, render_template, request, send_file

from ..auth.guards import admin_required
from ..common.validators import request_fields
from ..container import Container
from ..core.exceptions import ValidationError
from ..devices.controller import current_device_token
from ..reports.exporters import marks_csv


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="index")
    @app.route("/scan", endpoint="scan_page")
    def scan_page():
        """Check-in page opened from the QR deep link (?code=...&auto=1)."""
        active = container.session_service.get_active()
        code = (request.args.get("code") or active.code or "").strip()
        return render_template("scan.html", code=code, auto=request.args.get("auto") == "1")

    @app.route("/ping", endpoint="ping")
    def ping():
        return "pong"

    @app.route("/healthz", endpoint="healthz")
    def healthz():
        return "ok"

    @app.route("/favicon.ico", endpoint="favicon")
    def favicon():
        return "", 204

    @app.route("/api/check-in", methods=["POST"], endpoint="api_check_in")
    def api_check_in():
        data = request_fields(request.get_json(silent=True), request.form)
        try:
            result = container.attendance_service.check_in(
                data.get("code"),
                current_device_token(),
                data.get("studentNo"),
                data.get("name"),
            )
        except ValidationError as e:
            return jsonify({"status": "error", "message": str(e)}), 400

        return jsonify({"status": result.status.value, "code": result.code, "time": result.time})

    @app.route("/api/summary", methods=["GET"], endpoint="api_summary")
    def api_summary():
        s = container.attendance_service.summary(request.args.get("code"))
        return jsonify({"code": s.code, "count": s.count, "devices": s.devices})

    @app.route("/api/summary-all", methods=["GET"], endpoint="api_summary_all")
    @admin_required
    def api_summary_all():
        return jsonify(container.attendance_service.summary_all())

    @app.route("/api/reset", methods=["POST"], endpoint="api_reset")
    @admin_required
    def api_reset():
        data = request_fields(request.get_json(silent=True), request.form)
        try:
            removed = container.attendance_service.reset(data.get("code"))
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        return jsonify({"message": "Reset" if removed else "Code not found", "removed": removed})

    @app.route("/api/export", methods=["GET"], endpoint="api_export")
    @admin_required
    def api_export():
        code = (request.args.get("code") or "").strip()
        marks = container.attendance_service.get_marks(code)
        return send_file(
            io.BytesIO(marks_csv(code, marks)),
            mimetype="text/csv",
            as_attachment=True,
            download_name=f"{code or 'export'}.csv",
        )
