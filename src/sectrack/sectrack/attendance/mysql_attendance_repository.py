from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.enums import AttendanceStatus, SessionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_decimal
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "log_id, course_id, log_date, type, hours, status, is_auto_marked, note"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["log_id"]),
        course_id=int(r["course_id"]),
        date=r["log_date"],
        session_type=SessionType(r["type"]),
        hours=normalize_mysql_decimal(r["hours"]),
        status=AttendanceStatus(r["status"]),
        auto_marked=bool(r["is_auto_marked"]),
        note=r.get("note"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_logs WHERE log_id=%s", (int(record_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_course_date_type(
        self, *, course_id: int, day: date, session_type: SessionType
    ) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_logs
                WHERE course_id=%s AND log_date=%s AND type=%s
                """,
                (int(course_id), day, session_type.value),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_course(self, course_id: int) -> Sequence[AttendanceRecord]:
        return self.list_for_courses([course_id])

    def list_for_courses(self, course_ids: Iterable[int]) -> Sequence[AttendanceRecord]:
        ids = [int(c) for c in course_ids]
        if not ids:
            return []

        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_logs
                WHERE course_id IN ({placeholders})
                ORDER BY log_date DESC, type
                """,
                tuple(ids),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        course_id: int,
        day: date,
        session_type: SessionType,
        hours: float,
        status: AttendanceStatus,
        auto_marked: bool = False,
        note: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_logs(course_id, log_date, type, hours, status, is_auto_marked, note)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(course_id), day, session_type.value, hours, status.value, int(bool(auto_marked)), note),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        record_id: int,
        hours: float,
        status: AttendanceStatus,
        auto_marked: bool,
        note: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_logs
                SET hours=%s, status=%s, is_auto_marked=%s, note=%s
                WHERE log_id=%s
                """,
                (hours, status.value, int(bool(auto_marked)), note, int(record_id)),
            )
            return cur.rowcount > 0

    def delete(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_logs WHERE log_id=%s", (int(record_id),))
            return cur.rowcount > 0
