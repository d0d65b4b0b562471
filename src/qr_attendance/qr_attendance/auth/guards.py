from __future__ import annotations

from functools import wraps

from flask import jsonify, session

ADMIN_SESSION_FLAG = "is_admin"


def is_admin() -> bool:
    return bool(session.get(ADMIN_SESSION_FLAG))


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not is_admin():
            return jsonify({"error": "unauthorized"}), 401
        return view(*args, **kwargs)

    return wrapper
