from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import format_timestamp
from ..core.enums import LogType


@dataclass(frozen=True)
class TimeLogEntry:
    """Domain entity: one check-in/check-out event. Never mutated once stored."""

    id: int
    user_id: int
    type: LogType
    note: str
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "type": self.type.value,
            "note": self.note,
            "timestamp": format_timestamp(self.timestamp),
        }


@dataclass(frozen=True)
class ExportRow:
    """Read-model for the spreadsheet export (log joined with its user)."""

    name: str
    email: str
    department: str
    type: LogType
    note: str
    timestamp: datetime
