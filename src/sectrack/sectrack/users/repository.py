from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import Profile


class ProfileRepository(Protocol):
    """Repository interface for Profile.

    Note (DIP): services depend on this interface, never on a concrete database.
    """

    def get_by_user_id(self, user_id: int) -> Optional[Profile]:
        raise NotImplementedError

    def set_semester_start(self, user_id: int, semester_start: Optional[date]) -> bool:
        raise NotImplementedError

    def set_last_visit_date(self, user_id: int, last_visit_date: date) -> bool:
        raise NotImplementedError
