from __future__ import annotations

from datetime import date
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Profile
from .repository import ProfileRepository


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_user_id(self, user_id: int) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, semester_start, last_visit_date
                FROM profiles
                WHERE user_id=%s
                """,
                (int(user_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Profile(
                user_id=int(r["user_id"]),
                full_name=r["full_name"],
                semester_start=r.get("semester_start"),
                last_visit_date=r.get("last_visit_date"),
            )

    def set_semester_start(self, user_id: int, semester_start: Optional[date]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE profiles SET semester_start=%s WHERE user_id=%s", (semester_start, int(user_id)))
            return cur.rowcount > 0

    def set_last_visit_date(self, user_id: int, last_visit_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE profiles SET last_visit_date=%s WHERE user_id=%s", (last_visit_date, int(user_id)))
            return cur.rowcount > 0
