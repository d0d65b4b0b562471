from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import admin_required, is_admin
from ..common.validators import request_fields
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/active", methods=["GET"], endpoint="api_active")
    def api_active():
        return jsonify(container.session_service.get_active().to_dict())

    @app.route("/api/admin/active", methods=["POST"], endpoint="api_admin_set_active")
    @admin_required
    def api_admin_set_active():
        data = request_fields(request.get_json(silent=True), request.form)
        pointer = container.session_service.set_active(data.get("code", ""), is_admin=is_admin())
        return jsonify(pointer.to_dict())

    @app.route("/api/admin/stop", methods=["POST"], endpoint="api_admin_stop")
    @admin_required
    def api_admin_stop():
        container.session_service.stop(is_admin=is_admin())
        return jsonify(container.session_service.get_active().to_dict())
