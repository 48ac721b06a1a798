from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.datetime_utils import coerce_date
from ..core.constants import CSV_HEADERS, DATE_FORMAT, NO_DATA_WARNING, NOT_AVAILABLE
from .filters import ReportFilters
from .model import ReportRow

logger = logging.getLogger(__name__)


def _quote_name(name: str, *, escape_quotes: bool) -> str:
    if escape_quotes:
        name = name.replace('"', '""')
    return f'"{name}"'


def _number(value) -> str:
    return str(value if value is not None else 0)


def _row_fields(row: ReportRow, *, escape_quotes: bool) -> list[str]:
    return [
        _quote_name(row.employee_name or "", escape_quotes=escape_quotes),
        row.employee_id or "",
        row.date or "",
        row.check_in or NOT_AVAILABLE,
        row.check_out or NOT_AVAILABLE,
        row.status.value if row.status else "",
        _number(row.total_working_hours),
        row.expected_start_time or "",
        row.actual_check_in or NOT_AVAILABLE,
        _number(row.minutes_late),
        row.expected_end_time or "",
        row.actual_check_out or NOT_AVAILABLE,
        _number(row.minutes_early),
        _number(row.total_absent_days),
        _number(row.absence_percentage),
    ]


def to_csv(rows: Sequence[ReportRow], *, escape_quotes: bool = True) -> str:
    """Header plus one line per row, newline-joined.

    Only the employee name is quoted. With ``escape_quotes=False`` embedded
    quotes are written verbatim, matching the legacy export.
    """
    lines = [",".join(CSV_HEADERS)]
    lines.extend(",".join(_row_fields(r, escape_quotes=escape_quotes)) for r in rows)
    return "\n".join(lines)


def report_filename(filters: ReportFilters) -> str:
    start = coerce_date(filters.date_from)
    end = coerce_date(filters.date_to)
    return f"attendance-report-{start.strftime(DATE_FORMAT)}-to-{end.strftime(DATE_FORMAT)}.csv"


@dataclass(frozen=True)
class ExportResult:
    filename: Optional[str]
    content: Optional[str]
    warning: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.content is not None

    def encode(self) -> bytes:
        return (self.content or "").encode("utf-8")


class CsvExporter:
    def __init__(self, *, escape_quotes: bool = True):
        self._escape_quotes = bool(escape_quotes)

    def export(self, rows: Sequence[ReportRow], filters: ReportFilters) -> ExportResult:
        if not rows:
            logger.info("CSV export skipped: no rows")
            return ExportResult(filename=None, content=None, warning=NO_DATA_WARNING)
        return ExportResult(
            filename=report_filename(filters),
            content=to_csv(rows, escape_quotes=self._escape_quotes),
        )
