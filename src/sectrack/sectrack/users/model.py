from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Profile:
    """Domain entity: per-account settings.

    Note: ``last_visit_date`` is the auto-absent watermark; the semester end
    is never stored, it is always derived from ``semester_start``.
    """

    user_id: int
    full_name: str
    semester_start: Optional[date] = None
    last_visit_date: Optional[date] = None
