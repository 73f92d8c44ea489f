from __future__ import annotations

from datetime import date, time, timedelta
from pathlib import Path

import mysql.connector
import pytest

from src.gate_attendance.gate_attendance.attendance.model import AttendanceEvent
from src.gate_attendance.gate_attendance.attendance.mysql_event_repository import MySQLEventLogRepository
from src.gate_attendance.gate_attendance.core.enums import ScanStatus
from src.gate_attendance.gate_attendance.core.exceptions import ExternalStoreError
from src.gate_attendance.gate_attendance.database.bootstrap import _strip_create_db_and_use, split_statements
from src.gate_attendance.gate_attendance.database.mysql_base import format_mysql_time
from src.gate_attendance.gate_attendance.staff.mysql_roster_repository import MySQLRosterRepository

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


class FakeCursor:
    def __init__(self, rows=None, *, error: Exception | None = None):
        self.rows = rows or []
        self.executed: list[tuple[str, tuple | None]] = []
        self._error = error

    def execute(self, sql, params=None):
        if self._error:
            raise self._error
        self.executed.append((sql, params))

    def fetchall(self):
        return self.rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary: bool = False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, cursor: FakeCursor):
        self.connection = FakeConnection(cursor)

    def connect(self, *, with_database: bool = True):
        return self.connection


def test_roster_rows_map_to_staff_records():
    cursor = FakeCursor(
        [
            {"staff_id": 7, "name": "Amal", "position": "Teacher", "barcode": " B7 ", "section": "f"},
            {"staff_id": 8, "name": "Omar", "position": None, "barcode": "B8", "section": None},
        ]
    )

    staff = MySQLRosterRepository(FakeConnFactory(cursor)).list_staff()

    assert [(s.staff_id, s.position, s.barcode, s.section) for s in staff] == [
        ("7", "Teacher", "B7", "F"),
        ("8", "", "B8", ""),
    ]


def test_event_rows_normalize_time_values():
    cursor = FakeCursor(
        [
            {
                "staff_id": "1",
                "staff_name": "Amal",
                "section": "m",
                "work_date": date(2024, 1, 5),
                "work_time": timedelta(hours=7, minutes=5, seconds=3),
                "status": "check-in",
                "note": None,
            }
        ]
    )

    events = MySQLEventLogRepository(FakeConnFactory(cursor)).list_events()

    assert events == [
        AttendanceEvent(
            staff_id="1",
            staff_name="Amal",
            section="M",
            work_date=date(2024, 1, 5),
            time="07:05:03",
            status=ScanStatus.CHECK_IN,
            note="",
        )
    ]


def test_append_inserts_and_commits():
    cursor = FakeCursor()
    factory = FakeConnFactory(cursor)
    event = AttendanceEvent(
        staff_id="1",
        staff_name="Amal",
        section="M",
        work_date=date(2024, 1, 5),
        time="07:05:03",
        status=ScanStatus.PERMIT,
        note="note",
    )

    MySQLEventLogRepository(factory).append_event(event)

    (_, params), = cursor.executed
    assert params == ("1", "Amal", "M", date(2024, 1, 5), "07:05:03", "permit", "note")
    assert factory.connection.committed
    assert factory.connection.closed


def test_driver_errors_roll_back_and_surface():
    factory = FakeConnFactory(FakeCursor(error=mysql.connector.Error("server has gone away")))

    with pytest.raises(ExternalStoreError):
        MySQLRosterRepository(factory).list_staff()
    assert factory.connection.rolled_back
    assert factory.connection.closed


@pytest.mark.parametrize(
    "value, expected",
    [(timedelta(hours=13, minutes=2), "13:02:00"), (time(7, 30, 5), "07:30:05"), ("08:00:00", "08:00:00"), (None, "")],
)
def test_format_mysql_time(value, expected):
    assert format_mysql_time(value) == expected


def test_schema_has_one_statement_per_table():
    sql = _strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8"))
    statements = split_statements(sql)

    assert len(statements) == 2
    assert statements[0].startswith("CREATE TABLE IF NOT EXISTS staff_list")
    assert statements[1].startswith("CREATE TABLE IF NOT EXISTS attendance_log")
