from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List

import mysql.connector

from ..core.constants import CLOCK_TIME_FORMAT
from ..core.exceptions import ExternalStoreError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise ExternalStoreError("MySQL query failed") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def format_mysql_time(value: Any) -> str:
    """Render a MySQL TIME value as ``HH:MM:SS``.

    mysql-connector can return TIME as:
    - datetime.timedelta (C extension and pure driver)
    - datetime.time
    - string (e.g. '08:30:00')
    """

    if value is None:
        return ""

    if isinstance(value, time):
        return value.strftime(CLOCK_TIME_FORMAT)

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        hours, rest = divmod(total_seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

    return str(value).strip()
