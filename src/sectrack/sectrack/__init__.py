"""SecTrack package.

Feature modules (courses, attendance, schedules, semester, ...) sit on top of a
pure calculation engine (``budget`` and ``semester``) with thin Flask
controllers and repository-backed services.
"""
