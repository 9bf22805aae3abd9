from __future__ import annotations

from datetime import time
from typing import Optional, Sequence

from ..core.enums import SessionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_decimal, normalize_mysql_time
from .model import ClassSlot
from .repository import ScheduleRepository


def _to_slot(r: dict) -> ClassSlot:
    return ClassSlot(
        slot_id=int(r["slot_id"]),
        course_id=int(r["course_id"]),
        day_of_week=int(r["day_of_week"]),
        session_type=SessionType(r["type"]),
        hours=normalize_mysql_decimal(r["hours"]),
        start_time=normalize_mysql_time(r.get("start_time")),
        end_time=normalize_mysql_time(r.get("end_time")),
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, slot_id: int) -> Optional[ClassSlot]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT slot_id, course_id, day_of_week, type, hours, start_time, end_time
                FROM schedule_slots
                WHERE slot_id=%s
                """,
                (int(slot_id),),
            )
            r = fetchone(cur)
            return _to_slot(r) if r else None

    def list_for_user(self, user_id: int) -> Sequence[ClassSlot]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.slot_id, s.course_id, s.day_of_week, s.type, s.hours, s.start_time, s.end_time
                FROM schedule_slots s
                JOIN courses c ON c.course_id = s.course_id
                WHERE c.user_id=%s AND c.is_active=1
                ORDER BY s.day_of_week, s.start_time
                """,
                (int(user_id),),
            )
            return [_to_slot(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        course_id: int,
        day_of_week: int,
        session_type: SessionType,
        hours: float,
        start_time: Optional[time] = None,
        end_time: Optional[time] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO schedule_slots(course_id, day_of_week, type, hours, start_time, end_time)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(course_id), int(day_of_week), session_type.value, hours, start_time, end_time),
            )
            return int(cur.lastrowid)

    def delete(self, slot_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM schedule_slots WHERE slot_id=%s", (int(slot_id),))
            return cur.rowcount > 0
