from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Protocol, Sequence

from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import LogType
from .model import ExportRow, TimeLogEntry

# Called with the type of the user's latest entry (None without history)
# before the insert; raising aborts the append.
AppendGuard = Callable[[Optional[LogType]], object]


class TimeLogRepository(Protocol):
    """Append-only time-log store."""

    def append(
        self,
        user_id: int,
        log_type: LogType,
        note: str = "",
        *,
        guard: Optional[AppendGuard] = None,
    ) -> TimeLogEntry:
        """Store a new entry with a store-assigned timestamp.

        The guard check and the insert happen in one transaction, serialized per user.
        Raises ValidationError when the user does not exist.
        """

        raise NotImplementedError

    def latest_for_user(self, user_id: int) -> Optional[TimeLogEntry]:
        raise NotImplementedError

    def list_for_user(self, user_id: int, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[TimeLogEntry]:
        raise NotImplementedError

    def count_for_user_on_date(self, user_id: int, day: date) -> int:
        raise NotImplementedError

    def count_for_user_today(self, user_id: int) -> int:
        """Count entries on the store's current date (same clock that stamps entries)."""

        raise NotImplementedError

    def list_all_joined_with_user(self) -> Sequence[ExportRow]:
        raise NotImplementedError
