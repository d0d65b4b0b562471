from __future__ import annotations

from flask import Flask, jsonify, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.exceptions import AuthorizationError
from .guards import ADMIN_SESSION_FLAG, is_admin


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["GET"], endpoint="login")
    def login_page():
        return render_template("login.html")

    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def api_login():
        data = request.get_json(silent=True) or request.form
        try:
            container.auth_service.login(data.get("username", ""), data.get("password", ""))
        except AuthorizationError as e:
            app.logger.warning("Failed admin login from %s", request.remote_addr)
            return jsonify({"ok": False, "error": str(e)}), 401

        session.permanent = True
        session[ADMIN_SESSION_FLAG] = True
        return jsonify({"ok": True})

    @app.route("/api/logout", methods=["POST"], endpoint="api_logout")
    def api_logout():
        session.pop(ADMIN_SESSION_FLAG, None)
        return jsonify({"ok": True})

    @app.route("/admin", endpoint="admin_page")
    def admin_page():
        if not is_admin():
            return redirect(url_for("login"))
        return render_template("admin.html", active=container.session_service.get_active())
