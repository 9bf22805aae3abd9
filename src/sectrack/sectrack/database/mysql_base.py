from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)`` on a fresh connection; commit on success, roll back on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def normalize_mysql_decimal(value: Any) -> float:
    """DECIMAL columns come back as Decimal; the domain works with floats."""
    if isinstance(value, Decimal):
        return float(value)
    return float(value or 0)


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Slot start/end columns: the pure connector returns TIME as a timedelta since midnight."""
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        seconds = int(value.total_seconds()) % 86400
        return time(hour=seconds // 3600, minute=seconds % 3600 // 60, second=seconds % 60)
    raise TypeError(f"Unexpected TIME value from MySQL: {value!r}")
