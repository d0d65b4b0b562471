"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEVICE_COOKIE_NAME = "deviceId"
DEFAULT_DEVICE_COOKIE_DAYS = 180
DEFAULT_ADMIN_SESSION_HOURS = 12

ACTIVE_POINTER_KEY = "current"
ROSTER_KEY = "entries"

DEFAULT_QR_CODE = "DEMO"
MASK_VISIBLE_CHARS = 4
