from __future__ import annotations

import uuid

from flask import Flask, g, jsonify, request

from ..common.validators import request_fields
from ..container import Container
from ..core.constants import DEVICE_COOKIE_NAME
from ..core.exceptions import ValidationError


def current_device_token() -> str:
    """Token from the request's cookie; empty on the very first visit."""
    return request.cookies.get(DEVICE_COOKIE_NAME, "")


def register(app: Flask, container: Container) -> None:
    max_age = int(app.config["DEVICE_COOKIE_MAX_AGE_DAYS"]) * 24 * 60 * 60

    @app.before_request
    def issue_device_token():
        if not current_device_token():
            g.new_device_token = uuid.uuid4().hex

    @app.after_request
    def set_device_cookie(response):
        token = g.pop("new_device_token", None)
        if token:
            response.set_cookie(DEVICE_COOKIE_NAME, token, max_age=max_age, httponly=False, samesite="Lax")
        return response

    @app.route("/api/register-device", methods=["POST"], endpoint="api_register_device")
    def api_register_device():
        data = request_fields(request.get_json(silent=True), request.form)
        try:
            container.device_service.register(current_device_token(), data.get("studentNo"), data.get("name"))
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify({"ok": True})

    @app.route("/api/device-profile", methods=["GET"], endpoint="api_device_profile")
    def api_device_profile():
        identity = container.device_service.lookup(current_device_token())
        return jsonify(identity.to_dict() if identity else {})
