from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Course


class CourseRepository(Protocol):
    def get_by_id(self, course_id: int) -> Optional[Course]:
        raise NotImplementedError

    def list_for_user(self, user_id: int, *, active_only: bool = True) -> Sequence[Course]:
        raise NotImplementedError

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
        raise NotImplementedError

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
        raise NotImplementedError

    def delete(self, course_id: int) -> bool:
        """Deletes the course; its attendance records and slots go with it."""

        raise NotImplementedError
