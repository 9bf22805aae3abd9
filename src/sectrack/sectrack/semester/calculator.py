from __future__ import annotations

from datetime import date, datetime

from ..common.datetime_utils import to_day
from ..common.math_utils import round_half_up
from .model import SemesterConfig, SemesterProgress


def calculate_semester(config: SemesterConfig, now: date | datetime) -> SemesterProgress:
    """Position ``now`` within the semester window.

    Weeks are 1-indexed; ``current_week`` is 0 before the start and pinned to
    the last week once the semester is over. Time-of-day is ignored.
    """
    total_weeks = config.semester_length_weeks
    if config.semester_start is None:
        return SemesterProgress(
            total_weeks=total_weeks,
            current_week=0,
            weeks_remaining=total_weeks,
            has_started=False,
            is_completed=False,
            progress_percent=0,
            days_until_start=0,
        )

    today = to_day(now)
    start = to_day(config.semester_start)
    end = config.semester_end

    has_started = today >= start
    is_completed = today > end
    days_until_start = 0 if has_started else max(0, (start - today).days)

    if not has_started:
        current_week = 0
    elif is_completed:
        current_week = total_weeks
    else:
        # On the end date itself the raw week is total_weeks + 1.
        current_week = min(total_weeks, max(1, (today - start).days // 7 + 1))

    progress_percent = 0
    if has_started:
        progress_percent = min(100, round_half_up(current_week / total_weeks * 100))

    return SemesterProgress(
        total_weeks=total_weeks,
        current_week=current_week,
        weeks_remaining=max(0, total_weeks - current_week),
        has_started=has_started,
        is_completed=is_completed,
        progress_percent=progress_percent,
        days_until_start=days_until_start,
        semester_start=start,
        semester_end=end,
    )
