"""Example: build and export a report through the service layer (no Flask).

Controllers are only a thin layer; the report logic lives in the services.
"""

import importlib

from config import get_settings_module

from src.erp_dashboard.erp_dashboard.attendance.filters import ReportFilters
from src.erp_dashboard.erp_dashboard.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(access_config=settings.ACCESS_CONFIG, report_config=settings.REPORT_CONFIG)

    filters = ReportFilters(date_from="2024-06-03", date_to="2024-06-07")
    outcome = container.report_service.build_attendance_report(filters)
    for row in outcome.rows:
        print(row.date, row.employee_name, row.status.value, row.minutes_late, row.minutes_early)

    export = container.report_service.export_csv(filters)
    print(export.filename)


if __name__ == "__main__":
    main()
