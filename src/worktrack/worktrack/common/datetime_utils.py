from __future__ import annotations

from datetime import datetime

from ..core.constants import TIMESTAMP_FORMAT


def format_timestamp(value: datetime | None) -> str:
    if value is None:
        return ""
    return value.strftime(TIMESTAMP_FORMAT)
