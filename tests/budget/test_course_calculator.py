from __future__ import annotations

from datetime import date

import pytest

from fakes import absent
from src.sectrack.sectrack.attendance.model import AttendanceRecord
from src.sectrack.sectrack.budget.calculator import calculate, calculate_session, classify_usage, max_absent_hours
from src.sectrack.sectrack.core.enums import AttendanceStatus, RiskStatus, SessionType
from src.sectrack.sectrack.courses.model import Course


def _course(t_hours: int = 3, u_hours: int = 0, t_limit: float = 30, u_limit: float = 20, course_id: int = 1) -> Course:
    return Course(
        course_id=course_id,
        user_id=1,
        name="Test",
        weekly_theory_hours=t_hours,
        weekly_practice_hours=u_hours,
        theory_limit_percent=t_limit,
        practice_limit_percent=u_limit,
    )


def test_end_to_end_theory_budget():
    course = _course(t_hours=3, t_limit=30)
    records = [absent(i, 1, date(2025, 9, 15 + 7 * i), hours=3) for i in range(3)]

    calc = calculate(course, records, total_weeks=14)

    assert calc.theory.total_hours == 42
    assert calc.theory.max_absent_hours == 13
    assert calc.theory.current_absent_hours == 9
    assert calc.theory.remaining_hours == 4
    assert calc.theory.usage_percent == pytest.approx(69.23, abs=0.01)
    assert calc.theory.status is RiskStatus.WARNING
    assert calc.is_critical is False


@pytest.mark.parametrize(
    "total_hours, limit, expected",
    [
        (11, 50, 6),  # 5.5 rounds up
        (54, 10, 5),  # 5.4 rounds down
        (55, 10, 6),  # 5.5 from a fractional limit, no float drift
        (42, 30, 13),  # 12.6
        (28, 20, 6),  # 5.6
        (45, 10, 5),  # 4.5
        (25, 10, 3),  # 2.5
    ],
)
def test_max_absent_hours_rounds_half_up(total_hours, limit, expected):
    assert max_absent_hours(total_hours, limit) == expected


def test_rounding_pins_through_calculate():
    half = calculate(_course(t_hours=1, t_limit=50), [], total_weeks=11)
    below = calculate(_course(t_hours=3, t_limit=10), [], total_weeks=18)

    assert half.theory.max_absent_hours == 6
    assert below.theory.max_absent_hours == 5


@pytest.mark.parametrize(
    "usage, expected",
    [
        (0, RiskStatus.SAFE),
        (49.999, RiskStatus.SAFE),
        (50.0, RiskStatus.WARNING),
        (79.999, RiskStatus.WARNING),
        (80.0, RiskStatus.DANGER),
        (250.0, RiskStatus.DANGER),
    ],
)
def test_status_thresholds_are_sharp(usage, expected):
    assert classify_usage(usage) is expected


def test_thresholds_hit_exactly_from_hours():
    ten = calculate_session(weekly_hours=5, limit_percent=10, absent_hours=5, total_weeks=20)  # budget 10
    eight = calculate_session(weekly_hours=5, limit_percent=10, absent_hours=8, total_weeks=20)

    assert ten.max_absent_hours == 10
    assert ten.usage_percent == 50.0
    assert ten.status is RiskStatus.WARNING
    assert eight.usage_percent == 80.0
    assert eight.status is RiskStatus.DANGER


def test_usage_is_unbounded_and_remaining_never_negative():
    course = _course(t_hours=2, t_limit=20)  # 28 * 20% = 5.6 -> 6
    records = [absent(i, 1, date(2025, 9, 15 + i), hours=2) for i in range(6)]

    calc = calculate(course, records)

    assert calc.theory.max_absent_hours == 6
    assert calc.theory.current_absent_hours == 12
    assert calc.theory.usage_percent == pytest.approx(200.0)
    assert calc.theory.remaining_hours == 0
    assert calc.theory.is_exceeded is True
    assert calc.theory.health_percent == pytest.approx(-100.0)
    assert calc.is_critical is True


@pytest.mark.parametrize("status", [AttendanceStatus.CANCELLED, AttendanceStatus.REPORT, AttendanceStatus.PRESENT, AttendanceStatus.PENDING])
@pytest.mark.parametrize("hours", [1, 3, 40])
def test_non_absent_records_never_consume_budget(status, hours):
    course = _course(t_hours=3)
    records = [AttendanceRecord(1, 1, date(2025, 9, 15), SessionType.THEORY, hours, status)]

    calc = calculate(course, records)

    assert calc.theory.current_absent_hours == 0
    assert calc.theory.remaining_hours == calc.theory.max_absent_hours
    assert calc.theory.status is RiskStatus.SAFE


def test_zero_hour_session_type_is_safe_even_with_stray_absences():
    course = _course(t_hours=0, u_hours=2)
    records = [absent(1, 1, date(2025, 9, 15), hours=3, session_type=SessionType.THEORY)]

    calc = calculate(course, records)

    assert calc.theory.total_hours == 0
    assert calc.theory.max_absent_hours == 0
    assert calc.theory.usage_percent == 0
    assert calc.theory.status is RiskStatus.SAFE
    assert calc.theory.health_percent == 100.0
    assert calc.is_critical is False


def test_uses_record_hours_not_weekly_default():
    course = _course(t_hours=3, t_limit=30)  # budget 13
    records = [absent(1, 1, date(2025, 9, 15), hours=1.5), absent(2, 1, date(2025, 9, 22), hours=4)]

    calc = calculate(course, records)

    assert calc.theory.current_absent_hours == pytest.approx(5.5)
    assert calc.theory.remaining_hours == pytest.approx(7.5)


def test_theory_and_practice_are_independent(data_structures):
    records = [
        absent(1, 1, date(2025, 9, 17), hours=2, session_type=SessionType.PRACTICE),
        absent(2, 1, date(2025, 9, 24), hours=2, session_type=SessionType.PRACTICE),
        absent(3, 1, date(2025, 10, 1), hours=2, session_type=SessionType.PRACTICE),
    ]

    calc = calculate(data_structures, records)

    # U: 2 * 14 = 28, 20% -> 5.6 -> 6
    assert calc.practice.max_absent_hours == 6
    assert calc.practice.current_absent_hours == 6
    assert calc.practice.status is RiskStatus.DANGER
    assert calc.theory.current_absent_hours == 0
    assert calc.theory.status is RiskStatus.SAFE
    assert calc.is_critical is True
    assert calc.total_absent_hours == 6


def test_records_of_other_courses_are_ignored(data_structures):
    records = [
        absent(1, 1, date(2025, 9, 15), hours=3),
        absent(2, 99, date(2025, 9, 15), hours=3),
        absent(3, 99, date(2025, 9, 22), hours=3),
    ]

    calc = calculate(data_structures, records)
    only_own = calculate(data_structures, records[:1])

    assert calc.theory.current_absent_hours == 3
    assert calc == only_own


def test_auto_marked_records_count_like_user_entries(data_structures):
    manual = [absent(1, 1, date(2025, 9, 15))]
    auto = [AttendanceRecord(1, 1, date(2025, 9, 15), SessionType.THEORY, 3, AttendanceStatus.ABSENT, auto_marked=True)]

    assert calculate(data_structures, manual) == calculate(data_structures, auto)


def test_calculation_is_idempotent(data_structures):
    records = [absent(1, 1, date(2025, 9, 15)), absent(2, 1, date(2025, 9, 17), hours=2, session_type=SessionType.PRACTICE)]

    assert calculate(data_structures, records) == calculate(data_structures, records)


def test_total_weeks_changes_budget(data_structures):
    assert calculate(data_structures, [], total_weeks=16).theory.max_absent_hours == 14  # 48 * 30% = 14.4
