from __future__ import annotations

from datetime import date, datetime

import pytest

from src.sectrack.sectrack.semester.calculator import calculate_semester
from src.sectrack.sectrack.semester.model import SemesterConfig

START = date(2025, 9, 15)


def test_unset_start_returns_neutral_state():
    progress = calculate_semester(SemesterConfig(), datetime(2025, 10, 1, 12, 0))

    assert progress.total_weeks == 14
    assert progress.current_week == 0
    assert progress.weeks_remaining == 14
    assert progress.has_started is False
    assert progress.is_completed is False
    assert progress.progress_percent == 0
    assert progress.days_until_start == 0
    assert progress.semester_end is None


def test_first_day_is_week_one():
    progress = calculate_semester(SemesterConfig(START), date(2025, 9, 15))

    assert progress.has_started is True
    assert progress.current_week == 1
    assert progress.progress_percent == 7
    assert progress.weeks_remaining == 13
    assert progress.days_until_start == 0


def test_time_of_day_is_ignored():
    early = calculate_semester(SemesterConfig(START), datetime(2025, 9, 15, 0, 0, 1))
    late = calculate_semester(SemesterConfig(START), datetime(2025, 9, 15, 23, 59, 59))

    assert early == late
    assert early.has_started is True


def test_past_end_is_completed_and_pinned():
    progress = calculate_semester(SemesterConfig(START), date(2026, 1, 15))

    assert progress.is_completed is True
    assert progress.current_week == 14
    assert progress.progress_percent == 100
    assert progress.weeks_remaining == 0


def test_end_is_start_plus_fourteen_weeks():
    assert SemesterConfig(START).semester_end == date(2025, 12, 22)
    assert calculate_semester(SemesterConfig(START), START).semester_end == date(2025, 12, 22)


def test_end_date_itself_is_not_completed_but_clamped():
    progress = calculate_semester(SemesterConfig(START), date(2025, 12, 22))

    assert progress.is_completed is False
    assert progress.current_week == 14
    assert progress.progress_percent == 100


def test_day_after_end_is_completed():
    assert calculate_semester(SemesterConfig(START), date(2025, 12, 23)).is_completed is True


def test_before_start_counts_days():
    progress = calculate_semester(SemesterConfig(START), datetime(2025, 9, 10, 18, 0))

    assert progress.has_started is False
    assert progress.current_week == 0
    assert progress.days_until_start == 5
    assert progress.progress_percent == 0
    assert progress.weeks_remaining == 14


@pytest.mark.parametrize(
    "today, week, percent",
    [
        (date(2025, 9, 21), 1, 7),
        (date(2025, 9, 22), 2, 14),
        (date(2025, 10, 20), 6, 43),
        (date(2025, 11, 10), 9, 64),
        (date(2025, 12, 21), 14, 100),
    ],
)
def test_week_boundaries(today, week, percent):
    progress = calculate_semester(SemesterConfig(START), today)

    assert progress.current_week == week
    assert progress.progress_percent == percent


def test_contains_uses_inclusive_window():
    progress = calculate_semester(SemesterConfig(START), START)

    assert progress.contains(START)
    assert progress.contains(date(2025, 12, 22))
    assert not progress.contains(date(2025, 9, 14))
    assert not calculate_semester(SemesterConfig(), START).contains(START)


def test_config_and_progress_agree_on_window():
    config = SemesterConfig(START)
    progress = calculate_semester(config, START)

    for day in (date(2025, 9, 14), START, date(2025, 12, 22), date(2025, 12, 23)):
        assert config.contains(day) == progress.contains(day)
    assert not SemesterConfig().contains(START)
