"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SEMESTER_WEEKS = 14

DEFAULT_THEORY_LIMIT_PERCENT = 30
DEFAULT_PRACTICE_LIMIT_PERCENT = 20
DEFAULT_COLOR_CODE = "#00ff41"

# Upper bound for one logged session or slot; attendance_logs.hours is DECIMAL(4,2).
MAX_SESSION_HOURS = 24

WARNING_USAGE_PERCENT = 50
DANGER_USAGE_PERCENT = 80

AUTO_ABSENT_NOTE = "Otomatik olarak yok yazıldı"
