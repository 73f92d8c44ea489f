from __future__ import annotations

from typing import Sequence

from ..core.enums import ScanStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, format_mysql_time
from ..staff.model import normalize_section
from .model import AttendanceEvent
from .repository import EventLogRepository


class MySQLEventLogRepository(EventLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_events(self) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT staff_id, staff_name, section, work_date, work_time, status, note
                FROM attendance_log
                ORDER BY row_id ASC
                """
            )
            rows = fetchall(cur)
            return [
                AttendanceEvent(
                    staff_id=str(r["staff_id"]),
                    staff_name=r["staff_name"] or "",
                    section=normalize_section(r.get("section")),
                    work_date=r["work_date"],
                    time=format_mysql_time(r["work_time"]),
                    status=ScanStatus.parse(r["status"]),
                    note=r.get("note") or "",
                )
                for r in rows
            ]

    def append_event(self, event: AttendanceEvent) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_log(staff_id, staff_name, section, work_date, work_time, status, note)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    event.staff_id,
                    event.staff_name,
                    event.section,
                    event.work_date,
                    event.time,
                    event.status.value if event.status else "",
                    event.note,
                ),
            )
