"""Per-course absence budget calculation.

Turkish universities allow a course's students to miss a fixed percentage of
its scheduled hours, separately for theory (T, default 30%) and practice
(U, default 20%). The allowed hours are rounded half-up to match the
institutional system (12.6 -> 13, 5.5 -> 6).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..common.math_utils import round_half_up, to_decimal
from ..core.constants import DANGER_USAGE_PERCENT, SEMESTER_WEEKS, WARNING_USAGE_PERCENT
from ..core.enums import AttendanceStatus, RiskStatus, SessionType
from ..courses.model import Course
from .model import AttendanceCalculation, SessionBudget


def classify_usage(usage_percent: float) -> RiskStatus:
    """Map a usage percentage to a risk tier (lower bounds inclusive)."""
    if usage_percent >= DANGER_USAGE_PERCENT:
        return RiskStatus.DANGER
    if usage_percent >= WARNING_USAGE_PERCENT:
        return RiskStatus.WARNING
    return RiskStatus.SAFE


def max_absent_hours(total_hours, limit_percent) -> int:
    return round_half_up(to_decimal(total_hours) * to_decimal(limit_percent) / Decimal(100))


def calculate_session(
    weekly_hours: int,
    limit_percent: float,
    absent_hours: float,
    total_weeks: int = SEMESTER_WEEKS,
) -> SessionBudget:
    """Budget of a single session type given the absent hours already summed."""
    total_hours = weekly_hours * total_weeks
    max_hours = max_absent_hours(total_hours, limit_percent)
    remaining = max(0, max_hours - absent_hours)
    usage = absent_hours / max_hours * 100 if max_hours > 0 else 0.0

    return SessionBudget(
        total_hours=total_hours,
        max_absent_hours=max_hours,
        current_absent_hours=absent_hours,
        remaining_hours=remaining,
        usage_percent=usage,
        status=classify_usage(usage),
    )


def absent_hours_for(records: Iterable[AttendanceRecord], session_type: SessionType) -> float:
    return sum(
        (r.hours for r in records if r.status is AttendanceStatus.ABSENT and r.session_type is session_type),
        0,
    )


def calculate(
    course: Course,
    records: Iterable[AttendanceRecord],
    total_weeks: int = SEMESTER_WEEKS,
) -> AttendanceCalculation:
    """Absence budget of ``course`` for both session types.

    ``records`` may be the whole account's log: records of other courses are
    ignored. Only ABSENT records count, using each record's own ``hours``.
    ``usage_percent`` is not clamped, so exceeded budgets show above 100.
    """
    own = [r for r in records if r.course_id == course.course_id]

    theory = calculate_session(
        course.weekly_theory_hours,
        course.theory_limit_percent,
        absent_hours_for(own, SessionType.THEORY),
        total_weeks,
    )
    practice = calculate_session(
        course.weekly_practice_hours,
        course.practice_limit_percent,
        absent_hours_for(own, SessionType.PRACTICE),
        total_weeks,
    )
    return AttendanceCalculation(theory=theory, practice=practice)
