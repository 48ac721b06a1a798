from __future__ import annotations

from dataclasses import dataclass

from .access.permissions import PermissionPolicy
from .access.redirects import RedirectResolver, validate_consistency
from .access.service import AccessDecisionEngine
from .attendance.aggregator import AttendanceAggregator
from .attendance.export import CsvExporter
from .attendance.factory import AttendanceStrategyFactory
from .attendance.repository import AttendanceRepository, JsonFileAttendanceRepository
from .attendance.service import AttendanceReportService
from .common.datetime_utils import parse_wall_clock
from .core.constants import (
    DEFAULT_EXPECTED_END,
    DEFAULT_EXPECTED_START,
    DEFAULT_FALLBACK_PATH,
    LOGIN_PATH,
    ROOT_DASHBOARD_PATH,
)


@dataclass(frozen=True)
class Container:
    policy: PermissionPolicy
    resolver: RedirectResolver
    access_engine: AccessDecisionEngine

    attendance_repo: AttendanceRepository
    report_service: AttendanceReportService


def build_container(
    *,
    access_config: dict,
    report_config: dict,
    attendance_repo: AttendanceRepository | None = None,
    policy: PermissionPolicy | None = None,
) -> Container:
    policy = policy or PermissionPolicy()
    resolver = RedirectResolver(
        root_path=str(access_config.get("root_path", ROOT_DASHBOARD_PATH)),
        default_path=str(access_config.get("default_fallback_path", DEFAULT_FALLBACK_PATH)),
    )
    validate_consistency(policy, resolver)

    access_engine = AccessDecisionEngine(
        policy,
        resolver,
        login_path=str(access_config.get("login_path", LOGIN_PATH)),
    )

    if attendance_repo is None:
        attendance_repo = JsonFileAttendanceRepository(
            report_config["data_path"],
            default_start=parse_wall_clock(report_config.get("expected_start", DEFAULT_EXPECTED_START)),
            default_end=parse_wall_clock(report_config.get("expected_end", DEFAULT_EXPECTED_END)),
        )

    aggregator = AttendanceAggregator(
        strategy_factory=AttendanceStrategyFactory(),
        exclude_weekends=bool(report_config.get("exclude_weekends", False)),
    )
    report_service = AttendanceReportService(
        attendance_repo,
        aggregator=aggregator,
        exporter=CsvExporter(escape_quotes=bool(report_config.get("csv_escape_quotes", True))),
        policy=policy,
    )

    return Container(
        policy=policy,
        resolver=resolver,
        access_engine=access_engine,
        attendance_repo=attendance_repo,
        report_service=report_service,
    )
