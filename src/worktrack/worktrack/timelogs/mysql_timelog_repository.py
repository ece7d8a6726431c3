from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence

from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import LogType
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ExportRow, TimeLogEntry
from .repository import AppendGuard, TimeLogRepository

_ENTRY_COLUMNS = "id, user_id, type, note, timestamp"


def _row_to_entry(row: dict) -> TimeLogEntry:
    return TimeLogEntry(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        type=LogType(row["type"]),
        note=row.get("note") or "",
        timestamp=row["timestamp"],
    )


class MySQLTimeLogRepository(TimeLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(
        self,
        user_id: int,
        log_type: LogType,
        note: str = "",
        *,
        guard: Optional[AppendGuard] = None,
    ) -> TimeLogEntry:
        with db_cursor(self._conn_factory) as (_, cur):
            # Row lock on the owner serializes appends per user until commit.
            cur.execute("SELECT id FROM users WHERE id=%s FOR UPDATE", (int(user_id),))
            if not fetchone(cur):
                raise ValidationError("User does not exist")

            if guard is not None:
                cur.execute(
                    """
                    SELECT type FROM time_logs
                    WHERE user_id=%s
                    ORDER BY timestamp DESC, id DESC
                    LIMIT 1
                    """,
                    (int(user_id),),
                )
                latest = fetchone(cur)
                guard(LogType(latest["type"]) if latest else None)

            cur.execute(
                "INSERT INTO time_logs(user_id, type, note) VALUES(%s,%s,%s)",
                (int(user_id), log_type.value, note or ""),
            )
            entry_id = int(cur.lastrowid)

            cur.execute(f"SELECT {_ENTRY_COLUMNS} FROM time_logs WHERE id=%s", (entry_id,))
            return _row_to_entry(fetchone(cur))

    def latest_for_user(self, user_id: int) -> Optional[TimeLogEntry]:
        rows = self.list_for_user(user_id, limit=1)
        return rows[0] if rows else None

    def list_for_user(self, user_id: int, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[TimeLogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_ENTRY_COLUMNS}
                FROM time_logs
                WHERE user_id=%s
                ORDER BY timestamp DESC, id DESC
                LIMIT %s
                """,
                (int(user_id), int(limit)),
            )
            return [_row_to_entry(r) for r in fetchall(cur)]

    def count_for_user_on_date(self, user_id: int, day: date) -> int:
        start = datetime.combine(day, time.min)
        end = start + timedelta(days=1)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS cnt
                FROM time_logs
                WHERE user_id=%s AND timestamp >= %s AND timestamp < %s
                """,
                (int(user_id), start, end),
            )
            row = fetchone(cur)
            return int(row["cnt"]) if row else 0

    def count_for_user_today(self, user_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS cnt
                FROM time_logs
                WHERE user_id=%s AND timestamp >= CURDATE() AND timestamp < CURDATE() + INTERVAL 1 DAY
                """,
                (int(user_id),),
            )
            row = fetchone(cur)
            return int(row["cnt"]) if row else 0

    def list_all_joined_with_user(self) -> Sequence[ExportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT u.name, u.email, u.department, t.type, t.note, t.timestamp
                FROM time_logs t
                JOIN users u ON u.id = t.user_id
                ORDER BY t.timestamp DESC, t.id DESC
                """
            )
            return [
                ExportRow(
                    name=r["name"],
                    email=r["email"],
                    department=r.get("department") or "",
                    type=LogType(r["type"]),
                    note=r.get("note") or "",
                    timestamp=r["timestamp"],
                )
                for r in fetchall(cur)
            ]
