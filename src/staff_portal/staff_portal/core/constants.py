"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_FACILITY_TIMEZONE = "America/Chicago"
DEFAULT_REMOTE_TIMEZONE = "Asia/Manila"

# Used only when the timezone database cannot answer for a date.
DEFAULT_FACILITY_STANDARD_UTC_OFFSET_HOURS = -6
DEFAULT_REMOTE_UTC_OFFSET_HOURS = 8

# Offsets are probed at local noon; DST transitions happen at 2 AM.
OFFSET_PROBE_HOUR = 12

SLOT_START_HOUR = 8
SLOT_LENGTH_HOURS = 3
SLOT_COUNT = 8

DAYS_PER_WEEK = 7
HOURS_PER_DAY = 24

UNKNOWN_EMPLOYEE_NAME = "Unknown"
ALL_EMPLOYEES = "all"
