from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class LogType(str, Enum):
    """Kind of a time-log event as stored in the database."""

    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"


class AttendanceState(str, Enum):
    """Attendance status derived from a user's most recent event."""

    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"
