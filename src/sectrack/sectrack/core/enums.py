from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status of a single attendance record."""

    PENDING = "PENDING"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    CANCELLED = "CANCELLED"
    REPORT = "REPORT"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

    @property
    def counts_against_limit(self) -> bool:
        # Cancelled/holiday sessions and medical reports never consume budget.
        return self is AttendanceStatus.ABSENT


class SessionType(str, Enum):
    """Weekly session category: Teorik (T) or Uygulama (U)."""

    THEORY = "T"
    PRACTICE = "U"


class RiskStatus(str, Enum):
    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"


STATUS_LABELS = {
    AttendanceStatus.PENDING: "Bekliyor",
    AttendanceStatus.PRESENT: "Var",
    AttendanceStatus.ABSENT: "Yok",
    AttendanceStatus.CANCELLED: "İptal/Tatil",
    AttendanceStatus.REPORT: "Raporlu",
}

DAY_NAMES = ("Pazartesi", "Salı", "Çarşamba", "Perşembe", "Cuma", "Cumartesi", "Pazar")
