from __future__ import annotations

from datetime import date

import pytest

from fakes import InMemoryAttendance, InMemoryCourses
from src.sectrack.sectrack.attendance.model import AttendanceRecord
from src.sectrack.sectrack.attendance.service import AttendanceService
from src.sectrack.sectrack.core.enums import AttendanceStatus, RiskStatus, SessionType
from src.sectrack.sectrack.core.exceptions import NotFoundError, ValidationError
from src.sectrack.sectrack.courses.model import Course

DAY = date(2025, 9, 15)


@pytest.fixture
def theory_only() -> Course:
    return Course(course_id=2, user_id=1, name="Olasılık", weekly_theory_hours=3, weekly_practice_hours=0)


def test_mark_creates_user_entered_record(data_structures):
    repo = InMemoryAttendance()
    svc = AttendanceService(repo, InMemoryCourses(data_structures))

    rec = svc.mark_attendance(course_id=1, day=DAY, session_type=SessionType.THEORY, hours=3, status=AttendanceStatus.ABSENT)

    assert rec.status is AttendanceStatus.ABSENT
    assert rec.hours == 3
    assert rec.auto_marked is False
    assert len(repo.records) == 1


def test_mark_again_overwrites_same_day_and_type(data_structures):
    repo = InMemoryAttendance(
        AttendanceRecord(5, 1, DAY, SessionType.THEORY, 3, AttendanceStatus.ABSENT, auto_marked=True, note="auto")
    )
    svc = AttendanceService(repo, InMemoryCourses(data_structures))

    rec = svc.mark_attendance(course_id=1, day=DAY, session_type=SessionType.THEORY, hours=2, status=AttendanceStatus.PRESENT)

    assert rec.record_id == 5
    assert rec.status is AttendanceStatus.PRESENT
    assert rec.hours == 2
    assert rec.auto_marked is False
    assert rec.note == "auto"
    assert len(repo.records) == 1


def test_theory_and_practice_same_day_are_separate(data_structures):
    repo = InMemoryAttendance()
    svc = AttendanceService(repo, InMemoryCourses(data_structures))

    svc.mark_attendance(course_id=1, day=DAY, session_type=SessionType.THEORY, hours=3, status=AttendanceStatus.PRESENT)
    svc.mark_attendance(course_id=1, day=DAY, session_type=SessionType.PRACTICE, hours=2, status=AttendanceStatus.ABSENT)

    assert len(repo.records) == 2


def test_mark_rejects_unscheduled_session_type(theory_only):
    svc = AttendanceService(InMemoryAttendance(), InMemoryCourses(theory_only))

    with pytest.raises(ValidationError):
        svc.mark_attendance(course_id=2, day=DAY, session_type=SessionType.PRACTICE, hours=2, status=AttendanceStatus.ABSENT)


@pytest.mark.parametrize("hours", [0, -1, "x", None, "nan", "inf", float("nan"), 25])
def test_mark_rejects_invalid_hours(theory_only, hours):
    svc = AttendanceService(InMemoryAttendance(), InMemoryCourses(theory_only))

    with pytest.raises(ValidationError):
        svc.mark_attendance(course_id=2, day=DAY, session_type=SessionType.THEORY, hours=hours, status=AttendanceStatus.ABSENT)


def test_mark_unknown_course_raises():
    svc = AttendanceService(InMemoryAttendance(), InMemoryCourses())

    with pytest.raises(NotFoundError):
        svc.mark_attendance(course_id=9, day=DAY, session_type=SessionType.THEORY, hours=3, status=AttendanceStatus.ABSENT)


def test_update_status_to_report_releases_budget(data_structures):
    repo = InMemoryAttendance(AttendanceRecord(1, 1, DAY, SessionType.THEORY, 3, AttendanceStatus.ABSENT, auto_marked=True))
    svc = AttendanceService(repo, InMemoryCourses(data_structures))

    before = svc.calculate_for_course(1)
    rec = svc.update_status(1, AttendanceStatus.REPORT, note="doktor raporu")
    after = svc.calculate_for_course(1)

    assert before.theory.current_absent_hours == 3
    assert rec.auto_marked is False
    assert rec.note == "doktor raporu"
    assert after.theory.current_absent_hours == 0
    assert after.theory.status is RiskStatus.SAFE


def test_empty_note_clears_existing_note(data_structures):
    repo = InMemoryAttendance(AttendanceRecord(1, 1, DAY, SessionType.THEORY, 3, AttendanceStatus.REPORT, note="doktor raporu"))
    svc = AttendanceService(repo, InMemoryCourses(data_structures))

    kept = svc.update_status(1, AttendanceStatus.REPORT)
    assert kept.note == "doktor raporu"

    cleared = svc.mark_attendance(course_id=1, day=DAY, session_type=SessionType.THEORY, hours=3, status=AttendanceStatus.PRESENT, note="")
    assert cleared.note is None


def test_delete_record(data_structures):
    repo = InMemoryAttendance(AttendanceRecord(1, 1, DAY, SessionType.THEORY, 3, AttendanceStatus.ABSENT))
    svc = AttendanceService(repo, InMemoryCourses(data_structures))

    svc.delete_record(1)

    assert repo.records == []
    with pytest.raises(NotFoundError):
        svc.delete_record(1)


def test_to_view_labels_status():
    view = AttendanceService.to_view(AttendanceRecord(1, 1, DAY, SessionType.PRACTICE, 2, AttendanceStatus.CANCELLED))

    assert view["date"] == "2025-09-15"
    assert view["type"] == "U"
    assert view["label"] == "İptal/Tatil"
    assert view["counts_against_limit"] is False
