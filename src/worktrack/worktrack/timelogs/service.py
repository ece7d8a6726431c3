from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.validators import verbatim_text
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceState, LogType
from ..core.exceptions import InvalidTransitionError, ValidationError
from .export import build_workbook
from .model import TimeLogEntry
from .repository import TimeLogRepository
from .state_machine import guard_transition, state_from_latest

logger = logging.getLogger(__name__)


def parse_log_type(value: object) -> LogType:
    try:
        return LogType(value)
    except ValueError:
        raise ValidationError("type must be 'check-in' or 'check-out'") from None


class TimeLogService:
    def __init__(self, logs: TimeLogRepository, *, history_limit: int = DEFAULT_HISTORY_LIMIT):
        self._logs = logs
        self._history_limit = int(history_limit)

    def track(self, user_id: int, log_type: object, note: Optional[object] = None) -> TimeLogEntry:
        """Record a check-in/check-out if the attendance state allows it."""
        kind = parse_log_type(log_type)
        note_text = verbatim_text(note)
        try:
            entry = self._logs.append(user_id, kind, note_text, guard=guard_transition(kind))
        except InvalidTransitionError as e:
            logger.info("Rejected %s for user id=%s: %s", kind.value, user_id, e)
            raise
        logger.info("Recorded %s for user id=%s (entry id=%s)", kind.value, user_id, entry.id)
        return entry

    def history(self, user_id: int, limit: Optional[int] = None) -> Sequence[TimeLogEntry]:
        limit = self._history_limit if limit is None else max(0, min(int(limit), self._history_limit))
        return self._logs.list_for_user(user_id, limit)

    def current_state(self, user_id: int) -> AttendanceState:
        latest = self._logs.latest_for_user(user_id)
        return state_from_latest(latest.type if latest else None)

    def count_on(self, user_id: int, day: Optional[date] = None) -> int:
        """Entries on ``day``; without a day, on the store's current date."""
        if day is None:
            return self._logs.count_for_user_today(user_id)
        return self._logs.count_for_user_on_date(user_id, day)

    def export_workbook(self) -> bytes:
        rows = self._logs.list_all_joined_with_user()
        logger.info("Exporting %d time-log rows", len(rows))
        return build_workbook(rows)
