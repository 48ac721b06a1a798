import os

SECRET_KEY = "test-secret"

LOG_LEVEL = "WARNING"

ACCESS_CONFIG = {
    "login_path": "/login",
    "root_path": "/app/dashboard",
    "default_fallback_path": "/app",
}

REPORT_CONFIG = {
    "data_path": os.getenv("REPORT_DATA_PATH", "data/attendance.json"),
    "expected_start": "09:00",
    "expected_end": "17:00",
    "exclude_weekends": False,
    "csv_escape_quotes": True,
}

DEBUG = False
TESTING = True
