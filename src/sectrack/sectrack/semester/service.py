from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..core.exceptions import NotFoundError
from ..users.model import Profile
from ..users.repository import ProfileRepository
from .calculator import calculate_semester
from .model import SemesterConfig, SemesterProgress

logger = logging.getLogger(__name__)


class SemesterService:
    """Use case: read and configure the account's semester window."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def _require_profile(self, user_id: int) -> Profile:
        profile = self._profiles.get_by_user_id(int(user_id))
        if not profile:
            raise NotFoundError("Profile not found")
        return profile

    def get_config(self, user_id: int) -> SemesterConfig:
        return SemesterConfig(semester_start=self._require_profile(user_id).semester_start)

    def get_progress(self, user_id: int, *, now: date | datetime | None = None) -> SemesterProgress:
        return calculate_semester(self.get_config(user_id), now or datetime.now())

    def set_semester_start(self, user_id: int, semester_start: Optional[date]) -> SemesterConfig:
        self._require_profile(user_id)
        self._profiles.set_semester_start(int(user_id), semester_start)
        logger.info("Semester start for user %s set to %s", user_id, semester_start)
        return SemesterConfig(semester_start=semester_start)

    def clear_semester(self, user_id: int) -> SemesterConfig:
        return self.set_semester_start(user_id, None)
