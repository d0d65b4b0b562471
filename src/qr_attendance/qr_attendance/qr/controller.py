from __future__ import annotations

from flask import Flask, request

from ..container import Container
from ..core.constants import DEFAULT_QR_CODE
from .renderer import build_scan_url, render_png


def register(app: Flask, container: Container) -> None:
    @app.route("/qr", endpoint="qr_image")
    def qr_image():
        """PNG QR code deep-linking to the scan page for a session code."""
        code = (request.args.get("code") or request.args.get("t") or request.args.get("text") or "").strip()
        if not code:
            code = container.session_service.get_active().code or DEFAULT_QR_CODE

        png = render_png(build_scan_url(request.host_url, code))
        return app.response_class(png, mimetype="image/png")
