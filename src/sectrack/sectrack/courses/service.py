from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty, require_non_negative_int, require_percent
from ..core.constants import DEFAULT_COLOR_CODE, DEFAULT_PRACTICE_LIMIT_PERCENT, DEFAULT_THEORY_LIMIT_PERCENT
from ..core.exceptions import NotFoundError, ValidationError
from .model import Course
from .repository import CourseRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CourseInput:
    """Validated form data for creating or editing a course."""

    name: str
    course_code: Optional[str]
    weekly_theory_hours: int
    weekly_practice_hours: int
    theory_limit_percent: float
    practice_limit_percent: float
    color_code: str


class CourseService:
    """Use case: manage a student's courses."""

    def __init__(self, courses: CourseRepository):
        self._courses = courses

    @staticmethod
    def validate(
        *,
        name: str,
        weekly_theory_hours,
        weekly_practice_hours,
        course_code: Optional[str] = None,
        theory_limit_percent=None,
        practice_limit_percent=None,
        color_code: Optional[str] = None,
    ) -> CourseInput:
        t_hours = require_non_negative_int(weekly_theory_hours, "Weekly theory hours")
        u_hours = require_non_negative_int(weekly_practice_hours, "Weekly practice hours")
        if t_hours == 0 and u_hours == 0:
            raise ValidationError("A course needs theory or practice hours")

        if theory_limit_percent is None:
            theory_limit_percent = DEFAULT_THEORY_LIMIT_PERCENT
        if practice_limit_percent is None:
            practice_limit_percent = DEFAULT_PRACTICE_LIMIT_PERCENT

        return CourseInput(
            name=require_non_empty(name, "Course name"),
            course_code=optional_text(course_code),
            weekly_theory_hours=t_hours,
            weekly_practice_hours=u_hours,
            theory_limit_percent=require_percent(theory_limit_percent, "Theory limit"),
            practice_limit_percent=require_percent(practice_limit_percent, "Practice limit"),
            color_code=optional_text(color_code) or DEFAULT_COLOR_CODE,
        )

    def get(self, course_id: int) -> Course:
        course = self._courses.get_by_id(int(course_id))
        if not course:
            raise NotFoundError("Course not found")
        return course

    def list_active(self, user_id: int) -> Sequence[Course]:
        return self._courses.list_for_user(int(user_id), active_only=True)

    def create_course(self, *, user_id: int, **fields) -> int:
        data = self.validate(**fields)
        course_id = self._courses.create(
            user_id=int(user_id),
            name=data.name,
            course_code=data.course_code,
            weekly_theory_hours=data.weekly_theory_hours,
            weekly_practice_hours=data.weekly_practice_hours,
            theory_limit_percent=data.theory_limit_percent,
            practice_limit_percent=data.practice_limit_percent,
            color_code=data.color_code,
        )
        logger.info("Created course %s (%s) for user %s", course_id, data.name, user_id)
        return course_id

    def update_course(self, course_id: int, **fields) -> Course:
        current = self.get(course_id)
        # Omitted policy fields keep their stored values instead of falling back to defaults.
        kept = {
            "theory_limit_percent": current.theory_limit_percent,
            "practice_limit_percent": current.practice_limit_percent,
            "color_code": current.color_code,
        }
        for key, value in kept.items():
            if fields.get(key) is None:
                fields[key] = value
        data = self.validate(**fields)

        self._courses.update(
            course_id=current.course_id,
            name=data.name,
            course_code=data.course_code,
            weekly_theory_hours=data.weekly_theory_hours,
            weekly_practice_hours=data.weekly_practice_hours,
            theory_limit_percent=data.theory_limit_percent,
            practice_limit_percent=data.practice_limit_percent,
            color_code=data.color_code,
        )
        logger.info("Updated course %s", course_id)
        return self.get(course_id)

    def delete_course(self, course_id: int) -> None:
        self.get(course_id)
        if not self._courses.delete(int(course_id)):
            raise ValidationError("Could not delete course")
        logger.info("Deleted course %s", course_id)
