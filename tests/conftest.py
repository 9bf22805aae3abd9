from __future__ import annotations

from datetime import date, datetime

import pytest

from src.sectrack.sectrack.courses.model import Course


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 10, 20, 9, 30, 0)


@pytest.fixture
def semester_start() -> date:
    return date(2025, 9, 15)


@pytest.fixture
def data_structures() -> Course:
    return Course(
        course_id=1,
        user_id=1,
        name="Veri Yapıları",
        course_code="YZM202",
        weekly_theory_hours=3,
        weekly_practice_hours=2,
        theory_limit_percent=30,
        practice_limit_percent=20,
    )
