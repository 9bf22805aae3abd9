from __future__ import annotations

import logging
from datetime import datetime, time
from typing import Optional, Sequence

from ..common.validators import require_positive_number
from ..core.constants import MAX_SESSION_HOURS
from ..core.enums import SessionType
from ..core.exceptions import NotFoundError, ValidationError
from ..courses.repository import CourseRepository
from .model import ClassSlot
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


class ScheduleService:
    """Use case: maintain the weekly timetable used by the auto-absent backfill."""

    def __init__(self, schedules: ScheduleRepository, courses: CourseRepository):
        self._schedules = schedules
        self._courses = courses

    @staticmethod
    def _parse_time(value) -> Optional[time]:
        if value is None or isinstance(value, time):
            return value
        v = str(value).strip()
        if not v:
            return None
        try:
            return datetime.strptime(v, "%H:%M").time()
        except ValueError:
            raise ValidationError("Invalid time (HH:MM)")

    def add_slot(
        self,
        *,
        course_id: int,
        day_of_week,
        session_type: SessionType,
        hours=None,
        start_time=None,
        end_time=None,
    ) -> int:
        course = self._courses.get_by_id(int(course_id))
        if not course:
            raise NotFoundError("Course not found")
        if not course.has_session(session_type):
            raise ValidationError(f"{course.name} has no {session_type.value} sessions")

        try:
            day = int(day_of_week)
        except (TypeError, ValueError):
            raise ValidationError("Invalid day of week")
        if not 0 <= day <= 6:
            raise ValidationError("Invalid day of week")

        if hours is None:
            hours = course.weekly_hours(session_type)
        hours = require_positive_number(hours, "Hours", maximum=MAX_SESSION_HOURS)

        start = self._parse_time(start_time)
        end = self._parse_time(end_time)
        if start and end and start >= end:
            raise ValidationError("Start time must be before end time")

        slot_id = self._schedules.create(
            course_id=course.course_id,
            day_of_week=day,
            session_type=session_type,
            hours=hours,
            start_time=start,
            end_time=end,
        )
        logger.info("Added slot %s: course %s on day %s (%s)", slot_id, course_id, day, session_type.value)
        return slot_id

    def delete_slot(self, slot_id: int) -> None:
        if not self._schedules.get_by_id(int(slot_id)):
            raise NotFoundError("Slot not found")
        if not self._schedules.delete(int(slot_id)):
            raise ValidationError("Could not delete slot")
        logger.info("Deleted slot %s", slot_id)

    def list_for_user(self, user_id: int) -> Sequence[ClassSlot]:
        return self._schedules.list_for_user(int(user_id))

    @staticmethod
    def to_view(slot: ClassSlot) -> dict:
        def _fmt(t: Optional[time]) -> Optional[str]:
            return t.strftime("%H:%M") if t else None

        return {
            "id": slot.slot_id,
            "course_id": slot.course_id,
            "day_of_week": slot.day_of_week,
            "day_name": slot.day_name,
            "type": slot.session_type.value,
            "hours": slot.hours,
            "start_time": _fmt(slot.start_time),
            "end_time": _fmt(slot.end_time),
        }
