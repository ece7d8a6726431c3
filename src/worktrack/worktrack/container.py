from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .security.authenticator import BearerAuthenticator
from .security.passwords import DEFAULT_HASH_METHOD, PasswordHasher
from .security.tokens import TokenService
from .timelogs.mysql_timelog_repository import MySQLTimeLogRepository
from .timelogs.repository import TimeLogRepository
from .timelogs.service import TimeLogService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    logs_repo: TimeLogRepository

    hasher: PasswordHasher
    tokens: TokenService
    authenticator: BearerAuthenticator

    auth_service: AuthService
    user_service: UserService
    timelog_service: TimeLogService


def assemble(
    *,
    users_repo: UserRepository,
    logs_repo: TimeLogRepository,
    jwt_secret: str,
    token_ttl_hours: float = 0,
    hash_method: str = DEFAULT_HASH_METHOD,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any repository implementations."""
    hasher = PasswordHasher(hash_method)
    ttl = timedelta(hours=float(token_ttl_hours)) if token_ttl_hours else None
    tokens = TokenService(jwt_secret, ttl=ttl)

    user_service = UserService(users_repo, hasher)
    auth_service = AuthService(users_repo, user_service, hasher, tokens)
    timelog_service = TimeLogService(logs_repo)

    return Container(
        conn=conn,
        users_repo=users_repo,
        logs_repo=logs_repo,
        hasher=hasher,
        tokens=tokens,
        authenticator=BearerAuthenticator(tokens),
        auth_service=auth_service,
        user_service=user_service,
        timelog_service=timelog_service,
    )


def build_container(
    *,
    db_config: dict,
    jwt_secret: str,
    token_ttl_hours: float = 0,
    hash_method: str = DEFAULT_HASH_METHOD,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return assemble(
        users_repo=MySQLUserRepository(conn),
        logs_repo=MySQLTimeLogRepository(conn),
        jwt_secret=jwt_secret,
        token_ttl_hours=token_ttl_hours,
        hash_method=hash_method,
        conn=conn,
    )
