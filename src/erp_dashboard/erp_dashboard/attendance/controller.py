from __future__ import annotations

from flask import Flask, jsonify, request

from ..access.controller import current_session, module_required
from ..container import Container
from ..core.enums import Module
from .filters import ReportFilters, resolve_window


def _filters_from_request() -> ReportFilters:
    return ReportFilters(
        date_from=request.args.get("dateFrom") or None,
        date_to=request.args.get("dateTo") or None,
        employee_id=request.args.get("employeeId") or None,
        department=request.args.get("departmentId") or None,
    )


def register(app: Flask, container: Container) -> None:
    hr_required = module_required(container.access_engine, Module.HR)
    service = container.report_service

    @app.route("/api/hr/attendance/report", methods=["GET"], endpoint="attendance_report")
    @hr_required
    def attendance_report():
        filters = _filters_from_request()
        window, warning = resolve_window(filters)
        if window is None:
            return jsonify({"success": False, "message": warning, "count": 0, "data": []}), 400

        outcome = service.build_attendance_report(filters, viewer=current_session().user)

        if outcome.error:
            # Keep the last good report visible alongside the failure message.
            return jsonify(
                {
                    "success": False,
                    "message": outcome.error,
                    "stale": outcome.stale,
                    "count": outcome.count,
                    "data": [r.to_dict() for r in outcome.rows],
                }
            ), 503

        return jsonify(
            {
                "success": True,
                "count": outcome.count,
                "data": [r.to_dict() for r in outcome.rows],
                "warnings": outcome.warnings,
                "superseded": outcome.superseded,
            }
        )

    @app.route("/api/hr/attendance/report.csv", methods=["GET"], endpoint="attendance_report_csv")
    @hr_required
    def attendance_report_csv():
        filters = _filters_from_request()
        export = service.export_csv(filters, viewer=current_session().user)
        if not export.ok:
            return jsonify({"success": False, "message": export.warning}), 400

        return app.response_class(
            export.encode(),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )
