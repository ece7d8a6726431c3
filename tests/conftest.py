from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable, Optional

import pytest

from src.worktrack.worktrack.container import assemble
from src.worktrack.worktrack.core.enums import LogType, Role
from src.worktrack.worktrack.core.exceptions import DuplicateIdentityError, ValidationError
from src.worktrack.worktrack.main import create_app
from src.worktrack.worktrack.security.passwords import PasswordHasher
from src.worktrack.worktrack.timelogs.model import ExportRow, TimeLogEntry
from src.worktrack.worktrack.users.model import User

FAST_HASH = "pbkdf2:sha256:1000"
TEST_SECRET = "test-secret"


class InMemoryUsers:
    def __init__(self):
        self.by_id: dict[int, User] = {}
        self._next_id = 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.by_id.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.by_id.values() if u.email == email), None)

    def create_user(self, *, email, password_hash, name, department, role=Role.EMPLOYEE) -> User:
        if self.get_by_email(email):
            raise DuplicateIdentityError("Email already exists")
        user = User(
            id=self._next_id,
            email=email,
            password_hash=password_hash,
            name=name,
            role=role,
            department=department,
        )
        self.by_id[user.id] = user
        self._next_id += 1
        return user

    def list_public(self):
        return [u.to_public() for u in sorted(self.by_id.values(), key=lambda u: (u.name, u.id))]

    def exists_with_role(self, role) -> bool:
        return any(u.role == role for u in self.by_id.values())


class InMemoryTimeLogs:
    """Append-only fake; timestamps come from ``clock`` like the DB default.

    ``today`` stands in for the database's CURDATE().
    """

    def __init__(
        self,
        users: InMemoryUsers,
        clock: Callable[[], datetime] = datetime.now,
        today: Optional[date] = None,
    ):
        self._users = users
        self._entries: list[TimeLogEntry] = []
        self.clock = clock
        self.today = today

    def append(self, user_id, log_type, note="", *, guard=None) -> TimeLogEntry:
        if self._users.get_by_id(user_id) is None:
            raise ValidationError("User does not exist")
        if guard is not None:
            latest = self.latest_for_user(user_id)
            guard(latest.type if latest else None)
        entry = TimeLogEntry(
            id=len(self._entries) + 1,
            user_id=int(user_id),
            type=LogType(log_type),
            note=note or "",
            timestamp=self.clock(),
        )
        self._entries.append(entry)
        return entry

    def _for_user(self, user_id):
        items = [e for e in self._entries if e.user_id == int(user_id)]
        items.sort(key=lambda e: (e.timestamp, e.id), reverse=True)
        return items

    def latest_for_user(self, user_id):
        items = self._for_user(user_id)
        return items[0] if items else None

    def list_for_user(self, user_id, limit=100):
        return self._for_user(user_id)[:limit]

    def count_for_user_on_date(self, user_id, day: date) -> int:
        return sum(1 for e in self._for_user(user_id) if e.timestamp.date() == day)

    def count_for_user_today(self, user_id) -> int:
        return self.count_for_user_on_date(user_id, self.today or datetime.now().date())

    def list_all_joined_with_user(self):
        rows = []
        for e in sorted(self._entries, key=lambda e: (e.timestamp, e.id), reverse=True):
            u = self._users.get_by_id(e.user_id)
            rows.append(
                ExportRow(
                    name=u.name,
                    email=u.email,
                    department=u.department,
                    type=e.type,
                    note=e.note,
                    timestamp=e.timestamp,
                )
            )
        return rows


class StepClock:
    """Clock that advances one second per call, starting at ``start``."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 2, 8, 30, 0)


@pytest.fixture
def clock(fixed_now) -> StepClock:
    return StepClock(fixed_now)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(FAST_HASH)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def logs_repo(users_repo, clock, fixed_now) -> InMemoryTimeLogs:
    return InMemoryTimeLogs(users_repo, clock, today=fixed_now.date())


@pytest.fixture
def container(users_repo, logs_repo):
    return assemble(
        users_repo=users_repo,
        logs_repo=logs_repo,
        jwt_secret=TEST_SECRET,
        hash_method=FAST_HASH,
    )


@pytest.fixture
def app(container):
    return create_app(container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


class ScriptedCursor:
    """Cursor fake answering queries by SQL substring.

    ``rules`` is a list of ``(substring, result)``; the first rule whose
    substring appears in the statement wins. ``result`` is a row dict (or
    None) for fetchone, a list for fetchall, or an exception to raise.
    """

    def __init__(self, rules, lastrowid=None):
        self._rules = list(rules)
        self._result = None
        self.lastrowid = lastrowid
        self.executed: list[tuple[str, tuple]] = []

    @property
    def statements(self) -> list[str]:
        return [sql for sql, _ in self.executed]

    def execute(self, sql, params=()):
        sql = " ".join(sql.split())
        self.executed.append((sql, tuple(params or ())))
        self._result = None
        for needle, result in self._rules:
            if needle in sql:
                if isinstance(result, Exception):
                    raise result
                self._result = result
                break

    def fetchone(self):
        if isinstance(self._result, list):
            return self._result[0] if self._result else None
        return self._result

    def fetchall(self):
        if isinstance(self._result, list):
            return self._result
        return [self._result] if self._result else []

    def close(self):
        pass


class ScriptedConn:
    def __init__(self, cursor: ScriptedCursor):
        self._cursor = cursor
        self.events: list[str] = []

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.events.append("commit")

    def rollback(self):
        self.events.append("rollback")

    def close(self):
        self.events.append("close")


class ScriptedConnFactory:
    def __init__(self, rules, lastrowid=None):
        self.cursor = ScriptedCursor(rules, lastrowid=lastrowid)
        self.conn = ScriptedConn(self.cursor)

    def connect(self, *, with_database: bool = True):
        return self.conn


@pytest.fixture
def scripted_db():
    return ScriptedConnFactory
