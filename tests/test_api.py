from __future__ import annotations

from datetime import date
from zoneinfo import ZoneInfo

import pytest

from config import get_settings_module
from src.gate_attendance.gate_attendance.attendance.model import AttendanceEvent, SectionThreshold
from src.gate_attendance.gate_attendance.common.datetime_utils import now_in
from src.gate_attendance.gate_attendance.container import assemble_container
from src.gate_attendance.gate_attendance.core.constants import PERMIT_NOTE
from src.gate_attendance.gate_attendance.core.enums import ScanStatus
from src.gate_attendance.gate_attendance.core.exceptions import ExternalStoreError, UnavailableError
from src.gate_attendance.gate_attendance.main import create_app
from src.gate_attendance.gate_attendance.staff.model import StaffRecord
from src.gate_attendance.gate_attendance.users.service import build_credentials

DUBAI = ZoneInfo("Asia/Dubai")


class InMemoryRoster:
    def __init__(self, records, *, error: Exception | None = None):
        self.records = list(records)
        self._error = error

    def list_staff(self):
        if self._error:
            raise self._error
        return list(self.records)


class InMemoryEventLog:
    def __init__(self, events=None, *, error: Exception | None = None):
        self.events = list(events or [])
        self._error = error

    def list_events(self):
        if self._error:
            raise self._error
        return list(self.events)

    def append_event(self, event):
        if self._error:
            raise self._error
        self.events.append(event)


ROSTER = [
    StaffRecord(staff_id="1", name="A", position="Teacher", barcode="B1", section="M"),
    StaffRecord(staff_id="2", name="B", position="Teacher", barcode="B2", section="M"),
    StaffRecord(staff_id="3", name="C", position="Nurse", barcode="B3", section="F"),
]


def _event(staff_id: str, section: str, day: date, status: ScanStatus, note: str = "") -> AttendanceEvent:
    return AttendanceEvent(
        staff_id=staff_id,
        staff_name={"1": "A", "2": "B", "3": "C"}[staff_id],
        section=section,
        work_date=day,
        time="07:00:00",
        status=status,
        note=note,
    )


def _make_client(monkeypatch, roster, events):
    monkeypatch.setenv("APP_ENV", "testing")
    container = assemble_container(
        roster_repo=roster,
        events_repo=events,
        zone=DUBAI,
        thresholds={"M": SectionThreshold(7, 30), "F": SectionThreshold(8, 0)},
        credentials=build_credentials(
            {
                "admin": {"password": "1234", "role": "admin"},
                "hr": {"password": "1234", "role": "hr"},
                "gate": {"password": "1234", "role": "gate"},
            }
        ),
    )
    return create_app(container=container).test_client()


@pytest.fixture
def events():
    return InMemoryEventLog(
        [
            _event("1", "M", date(2024, 1, 1), ScanStatus.CHECK_IN),
            _event("1", "M", date(2024, 1, 2), ScanStatus.CHECK_IN),
            _event("3", "F", date(2024, 1, 2), ScanStatus.PERMIT, PERMIT_NOTE),
        ]
    )


@pytest.fixture
def client(monkeypatch, events):
    return _make_client(monkeypatch, InMemoryRoster(ROSTER), events)


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.get_json() == {"status": "ok"}


def test_scan_known_barcode_appends_event(client, events):
    res = client.get("/api/scan/B2?mode=check-in")

    assert res.status_code == 200
    body = res.get_json()
    assert body["ok"] is True
    assert body["staff"] == {"id": "2", "name": "B", "position": "Teacher", "barcode": "B2", "section": "M"}
    assert body["status"] == "check-in"
    assert len(events.events) == 4
    assert events.events[-1].staff_id == "2"


def test_scan_permit_mode(client, events):
    res = client.get("/api/scan/B3?mode=permit")
    assert res.get_json()["note"] == PERMIT_NOTE
    assert events.events[-1].status == ScanStatus.PERMIT


def test_scan_unknown_barcode_is_404(client, events):
    res = client.get("/api/scan/NOPE")
    assert res.status_code == 404
    assert res.get_json()["ok"] is False
    assert len(events.events) == 3


def test_scan_unknown_mode_is_400(client, events):
    res = client.get("/api/scan/B1?mode=teleport")
    assert res.status_code == 400
    assert len(events.events) == 3


def test_scan_with_unconfigured_store_is_500(monkeypatch):
    store_error = UnavailableError("Google Sheets not configured")
    client = _make_client(monkeypatch, InMemoryRoster([], error=store_error), InMemoryEventLog(error=store_error))

    res = client.get("/api/scan/B1")

    assert res.status_code == 500
    assert res.get_json() == {"ok": False, "error": "Attendance store not configured"}


def test_scan_append_failure_is_500(monkeypatch):
    client = _make_client(monkeypatch, InMemoryRoster(ROSTER), InMemoryEventLog(error=ExternalStoreError("rejected")))

    res = client.get("/api/scan/B1")

    assert res.status_code == 500
    assert res.get_json()["ok"] is False


def test_dashboard_counts_today(monkeypatch):
    today = now_in(DUBAI).date()
    events = InMemoryEventLog([_event("1", "M", today, ScanStatus.CHECK_IN)])
    client = _make_client(monkeypatch, InMemoryRoster(ROSTER), events)

    body = client.get("/api/dashboard").get_json()

    assert body["M"] == {"present": 1, "late": 0, "permit": 0, "early": 0, "absent": 1, "total": 2}
    assert body["F"] == {"present": 0, "late": 0, "permit": 0, "early": 0, "absent": 1, "total": 1}


def test_dashboard_store_failure_is_500(monkeypatch):
    client = _make_client(monkeypatch, InMemoryRoster(ROSTER), InMemoryEventLog(error=ExternalStoreError("rejected")))

    res = client.get("/api/dashboard")

    assert res.status_code == 500
    assert res.get_json() == {"error": "Dashboard error"}


def test_reports_present(client):
    res = client.get("/api/reports?reportType=present&section=all&startDate=2024-01-01&endDate=2024-01-02")

    body = res.get_json()
    assert res.status_code == 200
    assert body["success"] is True
    assert [(r["id"], r["notes"]) for r in body["data"]] == [("1", "attended on 01/01–02/01")]


def test_reports_absent_by_section(client):
    res = client.get("/api/reports?reportType=absent&section=M&startDate=2024-01-01&endDate=2024-01-02")
    assert [(r["id"], r["notes"]) for r in res.get_json()["data"]] == [("2", "absent on 01/01–02/01")]


def test_reports_unknown_type_is_empty(client):
    res = client.get("/api/reports?reportType=payroll")
    assert res.status_code == 200
    assert res.get_json() == {"success": True, "data": []}


def test_reports_store_failure_is_500(monkeypatch):
    client = _make_client(monkeypatch, InMemoryRoster(ROSTER), InMemoryEventLog(error=ExternalStoreError("rejected")))

    res = client.get("/api/reports?reportType=present")

    assert res.status_code == 500
    assert res.get_json() == {"success": False, "message": "Reports error"}


def test_reports_export_csv(client):
    res = client.get("/api/reports/export?reportType=permit&startDate=2024-01-01&endDate=2024-01-02")

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert "permit_2024-01-01_2024-01-02.csv" in res.headers["Content-Disposition"]
    text = res.data.decode("utf-8-sig")
    lines = text.splitlines()
    assert lines[0] == "id,name,section,date,time,type,notes"
    assert lines[1].startswith("3,C,F,2024-01-02,07:00:00,permit,")


@pytest.mark.parametrize("username, role", [("admin", "admin"), ("hr", "hr"), ("gate", "gate")])
def test_login_returns_role(client, username, role):
    res = client.post("/api/login", json={"username": username, "password": "1234"})
    assert res.get_json() == {"success": True, "role": role}


def test_login_rejects_bad_password(client):
    res = client.post("/api/login", json={"username": "admin", "password": "nope"})
    body = res.get_json()
    assert res.status_code == 200
    assert body["success"] is False
    assert body["message"]


def test_login_without_body(client):
    res = client.post("/api/login")
    assert res.get_json()["success"] is False


@pytest.mark.parametrize(
    ("env", "module"),
    [("prod", "config.production"), (" Testing ", "config.testing"), ("dev", "config.development"), ("staging", "config.development")],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module
