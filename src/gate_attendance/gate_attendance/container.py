from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Iterable, Mapping

from .attendance.classifier import ScanClassifier
from .attendance.model import SectionThreshold
from .attendance.mysql_event_repository import MySQLEventLogRepository
from .attendance.repository import EventLogRepository
from .attendance.service import ScanService
from .attendance.sheets_event_repository import SheetsEventLogRepository
from .common.datetime_utils import load_zone
from .core.constants import MAX_REPORT_DAYS
from .core.enums import ScanPolicy
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .sheets.client import SheetsClient, SheetsConfig
from .staff.directory import StaffDirectory
from .staff.mysql_roster_repository import MySQLRosterRepository
from .staff.repository import RosterRepository
from .staff.sheets_roster_repository import SheetsRosterRepository
from .users.model import Credential
from .users.service import AuthService, build_credentials


@dataclass(frozen=True)
class Container:
    roster_repo: RosterRepository
    events_repo: EventLogRepository

    directory: StaffDirectory
    classifier: ScanClassifier

    scan_service: ScanService
    dashboard_service: DashboardService
    report_service: ReportService
    auth_service: AuthService


def assemble_container(
    *,
    roster_repo: RosterRepository,
    events_repo: EventLogRepository,
    zone: tzinfo,
    thresholds: Mapping[str, SectionThreshold],
    policy: ScanPolicy = ScanPolicy.EXPLICIT,
    credentials: Iterable[Credential] = (),
    max_report_days: int = MAX_REPORT_DAYS,
) -> Container:
    directory = StaffDirectory(roster_repo)
    classifier = ScanClassifier(thresholds, policy=policy)

    return Container(
        roster_repo=roster_repo,
        events_repo=events_repo,
        directory=directory,
        classifier=classifier,
        scan_service=ScanService(directory, events_repo, classifier, zone=zone),
        dashboard_service=DashboardService(roster_repo, events_repo, zone=zone, sections=classifier.sections),
        report_service=ReportService(roster_repo, events_repo, zone=zone, max_days=max_report_days),
        auth_service=AuthService(credentials),
    )


def _build_repositories(settings) -> tuple[RosterRepository, EventLogRepository]:
    backend = str(getattr(settings, "STORE_BACKEND", "sheets")).lower()

    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG))
        return MySQLRosterRepository(conn), MySQLEventLogRepository(conn)

    if backend == "sheets":
        client = SheetsClient.connect(
            SheetsConfig(
                spreadsheet_id=settings.SPREADSHEET_ID,
                service_account_json=settings.GOOGLE_SERVICE_ACCOUNT,
            )
        )
        roster = SheetsRosterRepository(client, range_name=settings.ROSTER_RANGE)
        events = SheetsEventLogRepository(
            client,
            read_range=settings.EVENT_LOG_RANGE,
            append_range=settings.EVENT_LOG_APPEND_RANGE,
        )
        return roster, events

    raise ValueError(f"Unsupported STORE_BACKEND: {backend!r}")


def build_container(settings) -> Container:
    roster_repo, events_repo = _build_repositories(settings)
    return assemble_container(
        roster_repo=roster_repo,
        events_repo=events_repo,
        zone=load_zone(settings.TIMEZONE),
        thresholds={section: SectionThreshold.parse(value) for section, value in settings.SECTION_THRESHOLDS.items()},
        policy=ScanPolicy(settings.SCAN_POLICY),
        credentials=build_credentials(settings.AUTH_USERS),
        max_report_days=int(getattr(settings, "MAX_REPORT_DAYS", MAX_REPORT_DAYS)),
    )
