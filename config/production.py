import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staff_portal"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

FACILITY_TIMEZONE = os.getenv("FACILITY_TIMEZONE", "America/Chicago")
REMOTE_TIMEZONE = os.getenv("REMOTE_TIMEZONE", "Asia/Manila")

FACILITY_STANDARD_UTC_OFFSET_HOURS = int(os.getenv("FACILITY_STANDARD_UTC_OFFSET_HOURS", "-6"))
REMOTE_UTC_OFFSET_HOURS = int(os.getenv("REMOTE_UTC_OFFSET_HOURS", "8"))
