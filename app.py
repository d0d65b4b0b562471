"""WSGI entry point: ``gunicorn app:app`` or ``python app.py``."""
from src.qr_attendance.qr_attendance.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=3000, debug=app.config["DEBUG"])
