from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..core.constants import SEMESTER_WEEKS


def within_window(start: Optional[date], end: Optional[date], day: date) -> bool:
    """Inclusive [start, end] check; False when no semester is configured."""
    if start is None or end is None:
        return False
    return start <= day <= end


@dataclass(frozen=True)
class SemesterConfig:
    semester_start: Optional[date] = None
    semester_length_weeks: int = SEMESTER_WEEKS

    @property
    def semester_end(self) -> Optional[date]:
        if self.semester_start is None:
            return None
        return self.semester_start + timedelta(weeks=self.semester_length_weeks)

    def contains(self, day: date) -> bool:
        return within_window(self.semester_start, self.semester_end, day)


@dataclass(frozen=True)
class SemesterProgress:
    total_weeks: int
    current_week: int
    weeks_remaining: int
    has_started: bool
    is_completed: bool
    progress_percent: int
    days_until_start: int
    semester_start: Optional[date] = None
    semester_end: Optional[date] = None

    def contains(self, day: date) -> bool:
        return within_window(self.semester_start, self.semester_end, day)
