from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import StaffRecord, normalize_section
from .repository import RosterRepository


class MySQLRosterRepository(RosterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_staff(self) -> Sequence[StaffRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT staff_id, name, position, barcode, section
                FROM staff_list
                ORDER BY row_id ASC
                """
            )
            rows = fetchall(cur)
            return [
                StaffRecord(
                    staff_id=str(r["staff_id"]),
                    name=r["name"] or "",
                    position=r.get("position") or "",
                    barcode=str(r["barcode"] or "").strip(),
                    section=normalize_section(r.get("section")),
                )
                for r in rows
            ]
