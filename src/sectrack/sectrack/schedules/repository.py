from __future__ import annotations

from datetime import time
from typing import Optional, Protocol, Sequence

from ..core.enums import SessionType
from .model import ClassSlot


class ScheduleRepository(Protocol):
    def get_by_id(self, slot_id: int) -> Optional[ClassSlot]:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[ClassSlot]:
        """Slots of the user's active courses."""

        raise NotImplementedError

    def create(
        self,
        *,
        course_id: int,
        day_of_week: int,
        session_type: SessionType,
        hours: float,
        start_time: Optional[time] = None,
        end_time: Optional[time] = None,
    ) -> int:
        raise NotImplementedError

    def delete(self, slot_id: int) -> bool:
        raise NotImplementedError
