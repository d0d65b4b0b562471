from __future__ import annotations

import io
from urllib.parse import urlencode

import qrcode


def build_scan_url(base_url: str, code: str) -> str:
    """Deep link opened by the phone camera: ``<base>/scan?code=<code>&auto=1``."""
    return f"{base_url.rstrip('/')}/scan?{urlencode({'code': code, 'auto': 1})}"


def render_png(data: str, *, box_size: int = 6, border: int = 2) -> bytes:
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
