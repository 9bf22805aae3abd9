"""Example: use the calculation engine and the service layer without Flask."""

import importlib
from datetime import date

from config import get_settings_module

from src.sectrack.sectrack.attendance.model import AttendanceRecord
from src.sectrack.sectrack.budget.calculator import calculate
from src.sectrack.sectrack.container import build_container
from src.sectrack.sectrack.core.enums import AttendanceStatus, SessionType
from src.sectrack.sectrack.courses.model import Course


def offline_example() -> None:
    course = Course(course_id=1, user_id=1, name="Veri Yapıları", weekly_theory_hours=3, weekly_practice_hours=2)
    records = [
        AttendanceRecord(i, 1, date(2025, 9, 15 + 7 * i), SessionType.THEORY, 3, AttendanceStatus.ABSENT)
        for i in range(3)
    ]
    calc = calculate(course, records)
    print(f"T: {calc.theory.current_absent_hours}/{calc.theory.max_absent_hours} hours ({calc.theory.status.value})")
    print(f"U: {calc.practice.current_absent_hours}/{calc.practice.max_absent_hours} hours ({calc.practice.status.value})")


def database_example() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    dashboard = container.dashboard_service.load(user_id=1)
    for overview in dashboard.courses:
        print(overview.course.name, overview.calculation.is_critical)


if __name__ == "__main__":
    offline_example()
    database_example()
