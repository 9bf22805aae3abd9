from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..budget.calculator import calculate
from ..budget.model import AttendanceCalculation, CourseStats, SessionBudget
from ..budget.stats import summarize_records
from ..common.datetime_utils import format_iso_date, to_day
from ..courses.model import Course
from ..courses.repository import CourseRepository
from ..semester.model import SemesterProgress
from ..semester.service import SemesterService
from ..sync.auto_absent import AutoAbsentService, BackfillResult


@dataclass(frozen=True)
class CourseOverview:
    course: Course
    calculation: AttendanceCalculation
    stats: CourseStats


@dataclass(frozen=True)
class Dashboard:
    progress: SemesterProgress
    courses: list[CourseOverview]
    backfill: Optional[BackfillResult] = None

    @property
    def critical_count(self) -> int:
        return sum(1 for c in self.courses if c.calculation.is_critical)

    @property
    def total_absent_hours(self) -> float:
        return sum((c.calculation.total_absent_hours for c in self.courses), 0)


class DashboardService:
    """Read model: everything the dashboard shows for one account.

    The auto-absent backfill runs first so the calculation sees the
    synthesized records.
    """

    def __init__(
        self,
        courses: CourseRepository,
        attendance: AttendanceRepository,
        semester: SemesterService,
        auto_absent: Optional[AutoAbsentService] = None,
    ):
        self._courses = courses
        self._attendance = attendance
        self._semester = semester
        self._auto_absent = auto_absent

    def load(self, user_id: int, *, now: date | datetime | None = None) -> Dashboard:
        today = to_day(now or datetime.now())

        backfill = None
        if self._auto_absent:
            backfill = self._auto_absent.reconcile(user_id, today=today)

        progress = self._semester.get_progress(user_id, now=today)
        courses = list(self._courses.list_for_user(int(user_id), active_only=True))
        records = self._attendance.list_for_courses([c.course_id for c in courses])

        overviews = [
            CourseOverview(
                course=c,
                calculation=calculate(c, records, progress.total_weeks),
                stats=summarize_records(c, records),
            )
            for c in courses
        ]
        overviews.sort(key=lambda o: (not o.calculation.is_critical, o.course.name.lower()))

        return Dashboard(progress=progress, courses=overviews, backfill=backfill)


def session_to_view(budget: SessionBudget) -> dict:
    return {
        "total_hours": budget.total_hours,
        "max_absent_hours": budget.max_absent_hours,
        "current_absent_hours": budget.current_absent_hours,
        "remaining_hours": budget.remaining_hours,
        "usage_percent": round(budget.usage_percent, 2),
        "health_percent": round(max(0.0, budget.health_percent), 2),
        "status": budget.status.value,
        "is_exceeded": budget.is_exceeded,
    }


def calculation_to_view(calc: AttendanceCalculation) -> dict:
    return {
        "theory": session_to_view(calc.theory),
        "practice": session_to_view(calc.practice),
        "is_critical": calc.is_critical,
        "total_absent_hours": calc.total_absent_hours,
    }


def course_to_view(course: Course) -> dict:
    return {
        "id": course.course_id,
        "name": course.name,
        "course_code": course.course_code,
        "t_hours": course.weekly_theory_hours,
        "u_hours": course.weekly_practice_hours,
        "t_limit_percent": course.theory_limit_percent,
        "u_limit_percent": course.practice_limit_percent,
        "color_code": course.color_code,
        "is_active": course.is_active,
    }


def progress_to_view(progress: SemesterProgress) -> dict:
    return {
        "total_weeks": progress.total_weeks,
        "current_week": progress.current_week,
        "weeks_remaining": progress.weeks_remaining,
        "has_started": progress.has_started,
        "is_completed": progress.is_completed,
        "progress_percent": progress.progress_percent,
        "days_until_start": progress.days_until_start,
        "semester_start": format_iso_date(progress.semester_start),
        "semester_end": format_iso_date(progress.semester_end),
    }


def dashboard_to_view(dashboard: Dashboard) -> dict:
    return {
        "semester": progress_to_view(dashboard.progress),
        "courses": [
            {
                **course_to_view(o.course),
                "calculation": calculation_to_view(o.calculation),
                "total_classes": o.stats.total_classes,
                "attended_classes": o.stats.attended_classes,
                "missed_classes": o.stats.missed_classes,
                "excused_classes": o.stats.excused_classes,
                "cancelled_classes": o.stats.cancelled_classes,
                "pending_classes": o.stats.pending_classes,
                "auto_marked_classes": o.stats.auto_marked_classes,
            }
            for o in dashboard.courses
        ],
        "critical_count": dashboard.critical_count,
        "total_absent_hours": dashboard.total_absent_hours,
        "auto_marked": dashboard.backfill.created if dashboard.backfill else 0,
    }
