from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .courses.mysql_course_repository import MySQLCourseRepository
from .courses.repository import CourseRepository
from .courses.service import CourseService
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection, DBConfig
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.repository import ScheduleRepository
from .schedules.service import ScheduleService
from .semester.service import SemesterService
from .sync.auto_absent import AutoAbsentService
from .users.mysql_profile_repository import MySQLProfileRepository
from .users.repository import ProfileRepository


@dataclass(frozen=True)
class Container:
    profiles_repo: ProfileRepository
    courses_repo: CourseRepository
    attendance_repo: AttendanceRepository
    schedules_repo: ScheduleRepository

    course_service: CourseService
    attendance_service: AttendanceService
    schedule_service: ScheduleService
    semester_service: SemesterService
    auto_absent_service: AutoAbsentService
    dashboard_service: DashboardService


def build_services(
    *,
    profiles: ProfileRepository,
    courses: CourseRepository,
    attendance: AttendanceRepository,
    schedules: ScheduleRepository,
    auto_absent_enabled: bool = True,
) -> Container:
    """Wire services over any repository implementations (MySQL or in-memory)."""
    semester_service = SemesterService(profiles)
    auto_absent_service = AutoAbsentService(profiles, courses, schedules, attendance)

    return Container(
        profiles_repo=profiles,
        courses_repo=courses,
        attendance_repo=attendance,
        schedules_repo=schedules,
        course_service=CourseService(courses),
        attendance_service=AttendanceService(attendance, courses),
        schedule_service=ScheduleService(schedules, courses),
        semester_service=semester_service,
        auto_absent_service=auto_absent_service,
        dashboard_service=DashboardService(
            courses,
            attendance,
            semester_service,
            auto_absent_service if auto_absent_enabled else None,
        ),
    )


def build_container(*, db_config: dict, auto_absent_enabled: bool = True) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        profiles=MySQLProfileRepository(conn),
        courses=MySQLCourseRepository(conn),
        attendance=MySQLAttendanceRepository(conn),
        schedules=MySQLScheduleRepository(conn),
        auto_absent_enabled=auto_absent_enabled,
    )
