from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_decimal
from .model import Course
from .repository import CourseRepository

_COLUMNS = """
    course_id, user_id, name, course_code, t_hours, u_hours,
    t_limit_percent, u_limit_percent, color_code, is_active
"""


def _to_course(r: dict) -> Course:
    return Course(
        course_id=int(r["course_id"]),
        user_id=int(r["user_id"]),
        name=r["name"],
        course_code=r.get("course_code"),
        weekly_theory_hours=int(r["t_hours"]),
        weekly_practice_hours=int(r["u_hours"]),
        theory_limit_percent=normalize_mysql_decimal(r["t_limit_percent"]),
        practice_limit_percent=normalize_mysql_decimal(r["u_limit_percent"]),
        color_code=r["color_code"],
        is_active=bool(r["is_active"]),
    )


class MySQLCourseRepository(CourseRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, course_id: int) -> Optional[Course]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM courses WHERE course_id=%s", (int(course_id),))
            r = fetchone(cur)
            return _to_course(r) if r else None

    def list_for_user(self, user_id: int, *, active_only: bool = True) -> Sequence[Course]:
        sql = f"SELECT {_COLUMNS} FROM courses WHERE user_id=%s"
        if active_only:
            sql += " AND is_active=1"
        sql += " ORDER BY name"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, (int(user_id),))
            return [_to_course(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        user_id: int,
        name: str,
        course_code: Optional[str],
        weekly_theory_hours: int,
        weekly_practice_hours: int,
        theory_limit_percent: float,
        practice_limit_percent: float,
        color_code: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO courses(user_id, name, course_code, t_hours, u_hours,
                                    t_limit_percent, u_limit_percent, color_code)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(user_id),
                    name,
                    course_code,
                    int(weekly_theory_hours),
                    int(weekly_practice_hours),
                    theory_limit_percent,
                    practice_limit_percent,
                    color_code,
                ),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        course_id: int,
        name: str,
        course_code: Optional[str],
        weekly_theory_hours: int,
        weekly_practice_hours: int,
        theory_limit_percent: float,
        practice_limit_percent: float,
        color_code: str,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE courses
                SET name=%s, course_code=%s, t_hours=%s, u_hours=%s,
                    t_limit_percent=%s, u_limit_percent=%s, color_code=%s
                WHERE course_id=%s
                """,
                (
                    name,
                    course_code,
                    int(weekly_theory_hours),
                    int(weekly_practice_hours),
                    theory_limit_percent,
                    practice_limit_percent,
                    color_code,
                    int(course_id),
                ),
            )
            return cur.rowcount > 0

    def delete(self, course_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM courses WHERE course_id=%s", (int(course_id),))
            return cur.rowcount > 0
