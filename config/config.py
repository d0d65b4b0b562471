import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # Single shared admin credential
    ADMIN_USER = os.environ.get("ADMIN_USER", "admin")
    ADMIN_PASS = os.environ.get("ADMIN_PASS", "admin123")

    # Storage: "json" (files in DATA_DIR) or "mysql" (kv_entries table)
    STORE_BACKEND = os.environ.get("STORE_BACKEND", "json").lower()
    DATA_DIR = os.environ.get("DATA_DIR", os.path.join(os.getcwd(), "data"))

    DB_CONFIG = {
        "host": os.environ.get("DB_HOST", "localhost"),
        "port": int(os.environ.get("DB_PORT", "3306")),
        "user": os.environ.get("DB_USER", "root"),
        "password": os.environ.get("DB_PASSWORD", ""),
        "database": os.environ.get("DB_NAME", "qr_attendance"),
    }
    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))

    # Cookies
    DEVICE_COOKIE_MAX_AGE_DAYS = int(os.environ.get("DEVICE_COOKIE_MAX_AGE_DAYS", "180"))
    ADMIN_SESSION_HOURS = int(os.environ.get("ADMIN_SESSION_HOURS", "12"))

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE") or None
