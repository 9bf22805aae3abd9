from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus, SessionType


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance event of a course on a date.

    ``hours`` is the literal length of this session and may differ from the
    course's weekly default (partial sessions).
    """

    record_id: int
    course_id: int
    date: date
    session_type: SessionType
    hours: float
    status: AttendanceStatus
    auto_marked: bool = False
    note: Optional[str] = None
