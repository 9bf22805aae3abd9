from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from ..core.enums import DAY_NAMES, SessionType


@dataclass(frozen=True)
class ClassSlot:
    """Weekly timetable entry of a course (day_of_week: Monday=0 ... Sunday=6)."""

    slot_id: int
    course_id: int
    day_of_week: int
    session_type: SessionType
    hours: float
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_of_week]
