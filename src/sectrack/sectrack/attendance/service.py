from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..budget.calculator import calculate
from ..budget.model import AttendanceCalculation
from ..common.datetime_utils import format_iso_date
from ..common.validators import optional_text, require_positive_number
from ..core.constants import MAX_SESSION_HOURS, SEMESTER_WEEKS
from ..core.enums import AttendanceStatus, SessionType
from ..core.exceptions import NotFoundError, ValidationError
from ..courses.model import Course
from ..courses.repository import CourseRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record attendance and read a course's absence budget."""

    def __init__(self, attendance: AttendanceRepository, courses: CourseRepository):
        self._attendance = attendance
        self._courses = courses

    def _require_course(self, course_id: int) -> Course:
        course = self._courses.get_by_id(int(course_id))
        if not course:
            raise NotFoundError("Course not found")
        return course

    def _require_record(self, record_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(int(record_id))
        if not record:
            raise NotFoundError("Attendance record not found")
        return record

    def mark_attendance(
        self,
        *,
        course_id: int,
        day: date,
        session_type: SessionType,
        hours,
        status: AttendanceStatus,
        note: Optional[str] = None,
    ) -> AttendanceRecord:
        """Create or overwrite the record of (course, day, session type).

        A user-entered mark always clears the auto-marked flag.
        ``note=None`` keeps an existing note; an empty string clears it.
        """
        course = self._require_course(course_id)
        if not course.has_session(session_type):
            raise ValidationError(f"{course.name} has no {session_type.value} sessions")
        hours = require_positive_number(hours, "Hours", maximum=MAX_SESSION_HOURS)

        existing = self._attendance.get_for_course_date_type(
            course_id=course.course_id, day=day, session_type=session_type
        )
        if existing:
            self._attendance.update(
                record_id=existing.record_id,
                hours=hours,
                status=status,
                auto_marked=False,
                note=existing.note if note is None else optional_text(note),
            )
            logger.info("Updated attendance %s: %s %s -> %s", existing.record_id, day, session_type.value, status.value)
            return self._require_record(existing.record_id)

        record_id = self._attendance.create(
            course_id=course.course_id,
            day=day,
            session_type=session_type,
            hours=hours,
            status=status,
            auto_marked=False,
            note=optional_text(note),
        )
        logger.info("Recorded attendance %s for course %s: %s %s %s", record_id, course_id, day, session_type.value, status.value)
        return self._require_record(record_id)

    def update_status(self, record_id: int, status: AttendanceStatus, *, note: Optional[str] = None) -> AttendanceRecord:
        record = self._require_record(record_id)
        self._attendance.update(
            record_id=record.record_id,
            hours=record.hours,
            status=status,
            auto_marked=False,
            note=record.note if note is None else optional_text(note),
        )
        logger.info("Attendance %s status %s -> %s", record_id, record.status.value, status.value)
        return self._require_record(record_id)

    def delete_record(self, record_id: int) -> None:
        self._require_record(record_id)
        if not self._attendance.delete(int(record_id)):
            raise ValidationError("Could not delete attendance record")
        logger.info("Deleted attendance %s", record_id)

    def list_for_course(self, course_id: int) -> Sequence[AttendanceRecord]:
        course = self._require_course(course_id)
        return self._attendance.list_for_course(course.course_id)

    def calculate_for_course(self, course_id: int, *, total_weeks: int = SEMESTER_WEEKS) -> AttendanceCalculation:
        course = self._require_course(course_id)
        return calculate(course, self._attendance.list_for_course(course.course_id), total_weeks)

    @staticmethod
    def to_view(r: AttendanceRecord) -> dict:
        return {
            "id": r.record_id,
            "course_id": r.course_id,
            "date": format_iso_date(r.date),
            "type": r.session_type.value,
            "hours": r.hours,
            "status": r.status.value,
            "label": r.status.label,
            "counts_against_limit": r.status.counts_against_limit,
            "is_auto_marked": r.auto_marked,
            "note": r.note or "",
        }
