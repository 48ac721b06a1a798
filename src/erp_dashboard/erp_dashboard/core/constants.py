"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

LOGIN_PATH = "/login"
ROOT_DASHBOARD_PATH = "/app/dashboard"
DEFAULT_FALLBACK_PATH = "/app"

DEFAULT_EXPECTED_START = time(9, 0)
DEFAULT_EXPECTED_END = time(17, 0)

NOT_AVAILABLE = "N/A"
TIME_DISPLAY_FORMAT = "%I:%M %p"
DATE_FORMAT = "%Y-%m-%d"

NO_DATA_WARNING = "No data to export"
MISSING_RANGE_WARNING = "Date range (dateFrom and dateTo) is required"

CSV_HEADERS = (
    "Employee Name",
    "Employee ID",
    "Date",
    "Check-in",
    "Check-out",
    "Status",
    "Total Working Hours",
    "Expected Start",
    "Actual Check-in",
    "Minutes Late",
    "Expected End",
    "Actual Check-out",
    "Minutes Early",
    "Total Absent Days",
    "Absence %",
)
