from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..core.enums import Role
from ..core.exceptions import DuplicateIdentityError, StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import PublicUser, User
from .repository import UserRepository


def _row_to_user(row: dict) -> User:
    return User(
        id=int(row["id"]),
        email=row["email"],
        password_hash=row.get("password") or "",
        name=row["name"],
        role=Role(row.get("role") or Role.EMPLOYEE.value),
        department=row.get("department") or "",
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, email, password, name, role, department
                FROM users
                WHERE id=%s
                """,
                (int(user_id),),
            )
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, email, password, name, role, department
                FROM users
                WHERE email=%s
                """,
                (email,),
            )
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def create_user(
        self,
        *,
        email: str,
        password_hash: str,
        name: str,
        department: str,
        role: Role = Role.EMPLOYEE,
    ) -> User:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO users(email, password, name, role, department)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (email, password_hash, name, role.value, department),
                )
                user_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError as exc:
            if is_duplicate_key(exc):
                raise DuplicateIdentityError("Email already exists") from exc
            raise StorageError("Database operation failed") from exc

        return User(
            id=user_id,
            email=email,
            password_hash=password_hash,
            name=name,
            role=role,
            department=department,
        )

    def list_public(self) -> Sequence[PublicUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, email, name, role, department FROM users ORDER BY name ASC, id ASC")
            rows = fetchall(cur)
            return [
                PublicUser(
                    id=int(r["id"]),
                    email=r["email"],
                    name=r["name"],
                    role=Role(r.get("role") or Role.EMPLOYEE.value),
                    department=r.get("department") or "",
                )
                for r in rows
            ]

    def exists_with_role(self, role: Role) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM users WHERE role=%s LIMIT 1", (role.value,))
            return fetchone(cur) is not None
