"""Passive auto-absent backfill.

There is no scheduler: on each dashboard load the sessions that elapsed since
the previous visit and were never marked are written as ABSENT with
``auto_marked=True``. The student overrides them manually when they did attend.
The profile's ``last_visit_date`` acts as the watermark.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import iter_days
from ..core.constants import AUTO_ABSENT_NOTE
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..courses.repository import CourseRepository
from ..schedules.repository import ScheduleRepository
from ..semester.model import SemesterConfig
from ..users.repository import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackfillResult:
    created: int
    skipped_existing: int
    days_checked: int
    watermark: Optional[date]


class AutoAbsentService:
    def __init__(
        self,
        profiles: ProfileRepository,
        courses: CourseRepository,
        schedules: ScheduleRepository,
        attendance: AttendanceRepository,
    ):
        self._profiles = profiles
        self._courses = courses
        self._schedules = schedules
        self._attendance = attendance

    def reconcile(self, user_id: int, *, today: date) -> BackfillResult:
        """Mark unrecorded sessions in [last_visit_date, today) as absent.

        Today is never backfilled; its sessions may still be ahead. Safe to
        call repeatedly: existing (course, type, date) records are left alone.
        """
        profile = self._profiles.get_by_user_id(int(user_id))
        if not profile:
            raise NotFoundError("Profile not found")

        watermark = profile.last_visit_date
        if watermark is None:
            self._profiles.set_last_visit_date(profile.user_id, today)
            logger.debug("User %s: first visit, watermark set to %s", user_id, today)
            return BackfillResult(created=0, skipped_existing=0, days_checked=0, watermark=today)

        if watermark >= today:
            return BackfillResult(created=0, skipped_existing=0, days_checked=0, watermark=watermark)

        semester = SemesterConfig(semester_start=profile.semester_start)
        courses = {c.course_id: c for c in self._courses.list_for_user(profile.user_id, active_only=True)}
        # Slots left over after a course dropped a session type are not backfilled.
        slots = [
            s
            for s in self._schedules.list_for_user(profile.user_id)
            if s.course_id in courses and courses[s.course_id].has_session(s.session_type)
        ]

        created = 0
        skipped = 0
        days = 0
        seen: set[tuple] = set()

        for day in iter_days(watermark, today):
            days += 1
            if semester.semester_start is not None and not semester.contains(day):
                continue

            for slot in slots:
                if slot.day_of_week != day.weekday():
                    continue

                key = (slot.course_id, slot.session_type, day)
                if key in seen:
                    continue
                seen.add(key)

                existing = self._attendance.get_for_course_date_type(
                    course_id=slot.course_id, day=day, session_type=slot.session_type
                )
                if existing:
                    skipped += 1
                    continue

                self._attendance.create(
                    course_id=slot.course_id,
                    day=day,
                    session_type=slot.session_type,
                    hours=slot.hours,
                    status=AttendanceStatus.ABSENT,
                    auto_marked=True,
                    note=AUTO_ABSENT_NOTE,
                )
                created += 1

        self._profiles.set_last_visit_date(profile.user_id, today)
        if created:
            logger.info("User %s: auto-marked %s session(s) absent between %s and %s", user_id, created, watermark, today)
        return BackfillResult(created=created, skipped_existing=skipped, days_checked=days, watermark=today)
