from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_COLOR_CODE, DEFAULT_PRACTICE_LIMIT_PERCENT, DEFAULT_THEORY_LIMIT_PERCENT
from ..core.enums import SessionType


@dataclass(frozen=True)
class Course:
    """Domain entity: a course with its weekly T/U allotment and absence policy."""

    course_id: int
    user_id: int
    name: str
    weekly_theory_hours: int
    weekly_practice_hours: int
    theory_limit_percent: float = DEFAULT_THEORY_LIMIT_PERCENT
    practice_limit_percent: float = DEFAULT_PRACTICE_LIMIT_PERCENT
    course_code: Optional[str] = None
    color_code: str = DEFAULT_COLOR_CODE
    is_active: bool = True

    def weekly_hours(self, session_type: SessionType) -> int:
        if session_type is SessionType.THEORY:
            return self.weekly_theory_hours
        return self.weekly_practice_hours

    def has_session(self, session_type: SessionType) -> bool:
        return self.weekly_hours(session_type) > 0
