"""Constants and defaults.

Note: Keep business-rule numbers here to avoid magic numbers spread across code.
"""

# Expected work hours per day of week.
EXPECTED_HOURS_WEEKDAY = 8.5
EXPECTED_HOURS_SATURDAY = 4.0
EXPECTED_HOURS_SUNDAY = 0.0

# Strict 24-hour HH:MM (single-digit hour allowed, minutes always two digits).
TIME_24HR_PATTERN = r"^([01]?[0-9]|2[0-3]):([0-5][0-9])$"

MIN_YEAR = 1900
MAX_YEAR = 2100

# Month picker accepts a narrower window than the engine.
DASHBOARD_MIN_YEAR = 2000
DASHBOARD_MAX_YEAR = 2100

HOURS_DECIMALS = 2
PERCENT_DECIMALS = 1

LOW_PRODUCTIVITY_THRESHOLD = 50.0
HIGH_LEAVES_THRESHOLD = 2

ALLOWED_UPLOAD_EXTENSIONS = (".xlsx",)
REQUIRED_COLUMNS = ("Employee Name", "Date", "In Time", "Out Time")
