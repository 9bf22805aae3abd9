from __future__ import annotations

from collections import Counter
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus
from ..courses.model import Course
from .model import CourseStats


def summarize_records(course: Course, records: Iterable[AttendanceRecord]) -> CourseStats:
    own = [r for r in records if r.course_id == course.course_id]
    by_status = Counter(r.status for r in own)

    return CourseStats(
        total_classes=len(own),
        attended_classes=by_status[AttendanceStatus.PRESENT],
        missed_classes=by_status[AttendanceStatus.ABSENT],
        excused_classes=by_status[AttendanceStatus.REPORT],
        cancelled_classes=by_status[AttendanceStatus.CANCELLED],
        pending_classes=by_status[AttendanceStatus.PENDING],
        auto_marked_classes=sum(1 for r in own if r.auto_marked),
    )
