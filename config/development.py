import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

ACCESS_CONFIG = {
    "login_path": os.getenv("LOGIN_PATH", "/login"),
    "root_path": os.getenv("ROOT_DASHBOARD_PATH", "/app/dashboard"),
    "default_fallback_path": os.getenv("DEFAULT_FALLBACK_PATH", "/app"),
}

REPORT_CONFIG = {
    "data_path": os.getenv("REPORT_DATA_PATH", "data/attendance.json"),
    "expected_start": os.getenv("EXPECTED_START_TIME", "09:00"),
    "expected_end": os.getenv("EXPECTED_END_TIME", "17:00"),
    # The legacy backend counted Monday-Friday only
    "exclude_weekends": bool(int(os.getenv("EXCLUDE_WEEKENDS", "0"))),
    "csv_escape_quotes": bool(int(os.getenv("CSV_ESCAPE_QUOTES", "1"))),
}

DEBUG = True
