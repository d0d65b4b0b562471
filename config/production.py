import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
ADMIN_USER = Config.ADMIN_USER
ADMIN_PASS = Config.ADMIN_PASS

STORE_BACKEND = Config.STORE_BACKEND
DATA_DIR = Config.DATA_DIR
DB_CONFIG = Config.DB_CONFIG

DEBUG = False

AUTO_INIT_DB = Config.AUTO_INIT_DB

DEVICE_COOKIE_MAX_AGE_DAYS = Config.DEVICE_COOKIE_MAX_AGE_DAYS
ADMIN_SESSION_HOURS = Config.ADMIN_SESSION_HOURS

LOG_LEVEL = Config.LOG_LEVEL
LOG_FILE = os.getenv("LOG_FILE", "qr_attendance.log")
