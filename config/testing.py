import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staff_portal_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"

FACILITY_TIMEZONE = "America/Chicago"
REMOTE_TIMEZONE = "Asia/Manila"

FACILITY_STANDARD_UTC_OFFSET_HOURS = -6
REMOTE_UTC_OFFSET_HOURS = 8
