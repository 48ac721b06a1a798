from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from ..access.model import User
from ..access.permissions import DEFAULT_POLICY, PermissionPolicy
from ..core.enums import Department
from ..core.exceptions import DataSourceError
from .aggregator import AttendanceAggregator
from .export import CsvExporter, ExportResult
from .filters import ReportFilters, resolve_window
from .model import ReportRow
from .repository import AttendanceRepository
from .sequencing import LatestRequestGate

logger = logging.getLogger(__name__)

# Matches no employee; used for viewers without a department.
NO_DEPARTMENT = "-"


@dataclass(frozen=True)
class ReportOutcome:
    rows: list[ReportRow] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: Optional[str] = None
    stale: bool = False
    superseded: bool = False

    @property
    def count(self) -> int:
        return len(self.rows)


class AttendanceReportService:
    """Use case: load raw attendance, filter, aggregate and publish a report.

    Only the newest request may replace the published report. When the data
    source fails the previously published rows are returned marked stale.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        aggregator: Optional[AttendanceAggregator] = None,
        exporter: Optional[CsvExporter] = None,
        policy: Optional[PermissionPolicy] = None,
        gate: Optional[LatestRequestGate[ReportOutcome]] = None,
    ):
        self._attendance = attendance
        self._aggregator = aggregator or AttendanceAggregator()
        self._exporter = exporter or CsvExporter()
        self._policy = policy or DEFAULT_POLICY
        self._gate = gate or LatestRequestGate()

    def issue_ticket(self) -> int:
        return self._gate.issue()

    @property
    def latest(self) -> Optional[ReportOutcome]:
        return self._gate.latest

    def _superseded(self) -> ReportOutcome:
        return replace(self._gate.latest or ReportOutcome(), superseded=True)

    def _scope(self, filters: ReportFilters, viewer: Optional[User]) -> ReportFilters:
        if viewer is None or self._policy.can_view_all_attendance_records(viewer):
            return filters
        department = Department.parse(viewer.department)
        if department is None:
            return replace(filters, department=str(viewer.department or NO_DEPARTMENT))
        return replace(filters, department=department.value)

    def build_attendance_report(
        self,
        filters: ReportFilters,
        *,
        viewer: Optional[User] = None,
        ticket: Optional[int] = None,
    ) -> ReportOutcome:
        ticket = ticket if ticket is not None else self.issue_ticket()
        filters = self._scope(filters, viewer)

        window, warning = resolve_window(filters)
        if window is None:
            return ReportOutcome(warnings=[warning])

        try:
            snapshot = self._attendance.load_snapshot(start_date=window.start, end_date=window.end)
        except DataSourceError as e:
            if not self._gate.is_current(ticket):
                logger.info("Superseded attendance report request failed (ticket %s): %s", ticket, e)
                return self._superseded()
            logger.error("Attendance report fetch failed: %s", e)
            last = self._gate.latest
            return ReportOutcome(
                rows=list(last.rows) if last else [],
                warnings=[],
                error="Failed to fetch attendance report",
                stale=last is not None,
            )

        result = self._aggregator.build_report(snapshot.records, filters, snapshot.employees)
        outcome = ReportOutcome(rows=result.rows, warnings=result.warnings)

        if not self._gate.publish(ticket, outcome):
            logger.info("Discarding superseded attendance report (ticket %s)", ticket)
            return self._superseded()

        logger.info("Attendance report built: %s rows for %s..%s", outcome.count, window.start, window.end)
        return outcome

    def export_csv(self, filters: ReportFilters, *, viewer: Optional[User] = None) -> ExportResult:
        outcome = self.build_attendance_report(filters, viewer=viewer)
        if outcome.error:
            return ExportResult(filename=None, content=None, warning=outcome.error)
        if not outcome.rows and outcome.warnings:
            return ExportResult(filename=None, content=None, warning=outcome.warnings[0])
        return self._exporter.export(outcome.rows, self._scope(filters, viewer))
