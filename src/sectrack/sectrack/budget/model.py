from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import RiskStatus


@dataclass(frozen=True)
class SessionBudget:
    """Absence budget of one session type (T or U) of a course."""

    total_hours: int
    max_absent_hours: int
    current_absent_hours: float
    remaining_hours: float
    usage_percent: float
    status: RiskStatus

    @property
    def is_exceeded(self) -> bool:
        return self.current_absent_hours > self.max_absent_hours

    @property
    def health_percent(self) -> float:
        """Share of the budget still unused; negative once exceeded."""
        if self.max_absent_hours <= 0:
            return 100.0
        return (self.max_absent_hours - self.current_absent_hours) / self.max_absent_hours * 100


@dataclass(frozen=True)
class AttendanceCalculation:
    theory: SessionBudget
    practice: SessionBudget

    @property
    def is_critical(self) -> bool:
        return self.theory.status is RiskStatus.DANGER or self.practice.status is RiskStatus.DANGER

    @property
    def total_absent_hours(self) -> float:
        return self.theory.current_absent_hours + self.practice.current_absent_hours


@dataclass(frozen=True)
class CourseStats:
    """Record counts of a course, for display next to the budget."""

    total_classes: int
    attended_classes: int
    missed_classes: int
    excused_classes: int
    cancelled_classes: int
    pending_classes: int
    auto_marked_classes: int
