import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY
ADMIN_USER = Config.ADMIN_USER
ADMIN_PASS = Config.ADMIN_PASS

STORE_BACKEND = Config.STORE_BACKEND
DATA_DIR = Config.DATA_DIR
DB_CONFIG = Config.DB_CONFIG

DEBUG = True

# If enabled (mysql backend), app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

DEVICE_COOKIE_MAX_AGE_DAYS = Config.DEVICE_COOKIE_MAX_AGE_DAYS
ADMIN_SESSION_HOURS = Config.ADMIN_SESSION_HOURS

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = Config.LOG_FILE
