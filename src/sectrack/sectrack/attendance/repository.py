from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus, SessionType
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_course_date_type(
        self, *, course_id: int, day: date, session_type: SessionType
    ) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_course(self, course_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_courses(self, course_ids: Iterable[int]) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        course_id: int,
        day: date,
        session_type: SessionType,
        hours: float,
        status: AttendanceStatus,
        auto_marked: bool = False,
        note: Optional[str] = None,
    ) -> int:
        """Insert a record; (course_id, day, session_type) is unique."""

        raise NotImplementedError

    def update(
        self,
        *,
        record_id: int,
        hours: float,
        status: AttendanceStatus,
        auto_marked: bool,
        note: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError

    def delete(self, record_id: int) -> bool:
        raise NotImplementedError
