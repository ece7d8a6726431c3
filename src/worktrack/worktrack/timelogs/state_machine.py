"""Two-state attendance machine: CHECKED_OUT <-> CHECKED_IN.

The current state is never stored; it is derived from the type of the
user's most recent time-log entry.
"""
from __future__ import annotations

from typing import Optional

from ..core.enums import AttendanceState, LogType
from ..core.exceptions import InvalidTransitionError

_TRANSITIONS = {
    (AttendanceState.CHECKED_OUT, LogType.CHECK_IN): AttendanceState.CHECKED_IN,
    (AttendanceState.CHECKED_IN, LogType.CHECK_OUT): AttendanceState.CHECKED_OUT,
}


def state_from_latest(latest: Optional[LogType]) -> AttendanceState:
    if latest == LogType.CHECK_IN:
        return AttendanceState.CHECKED_IN
    return AttendanceState.CHECKED_OUT


def transition(state: AttendanceState, log_type: LogType) -> AttendanceState:
    try:
        return _TRANSITIONS[(state, log_type)]
    except KeyError:
        if log_type == LogType.CHECK_IN:
            raise InvalidTransitionError("Already checked in") from None
        raise InvalidTransitionError("Not checked in") from None


def guard_transition(log_type: LogType):
    """Build an append guard that only lets legal transitions through."""

    def guard(latest: Optional[LogType]) -> AttendanceState:
        return transition(state_from_latest(latest), log_type)

    return guard
