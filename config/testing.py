import os
import tempfile

SECRET_KEY = "test-secret"
ADMIN_USER = "admin"
ADMIN_PASS = "admin123"

STORE_BACKEND = "json"
# Created by the JSON store on first write; tests pass their own tmp dir.
DATA_DIR = os.path.join(tempfile.gettempdir(), "qr_attendance_test")
DB_CONFIG = {}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

DEVICE_COOKIE_MAX_AGE_DAYS = 180
ADMIN_SESSION_HOURS = 12

LOG_LEVEL = "WARNING"
LOG_FILE = None
