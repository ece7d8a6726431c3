from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.validators import optional_text, require_min_length, require_non_empty
from ..core.constants import DEFAULT_DEPARTMENT, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, DuplicateIdentityError
from ..security.passwords import PasswordHasher
from ..security.tokens import SessionClaim, TokenService
from .model import PublicUser, User
from .repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass(frozen=True)
class AuthResult:
    """What register/login hand back to the client."""

    token: str
    user: PublicUser

    def to_dict(self) -> dict:
        return {"token": self.token, "user": self.user.to_dict()}


def claim_for(user: User) -> SessionClaim:
    return SessionClaim(
        id=user.id,
        email=user.email,
        role=user.role,
        name=user.name,
        department=user.department,
    )


class UserService:
    """Use case: manage accounts (registration, team list, admin bootstrap)."""

    def __init__(self, users: UserRepository, hasher: PasswordHasher):
        self._users = users
        self._hasher = hasher

    def register(
        self,
        *,
        email: str,
        password: str,
        name: str,
        department: Optional[str] = None,
        role: Role = Role.EMPLOYEE,
    ) -> User:
        email = require_non_empty(email, "Email")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        name = require_non_empty(name, "Name")
        department = optional_text(department, DEFAULT_DEPARTMENT)

        # Fast path for a friendly error; the UNIQUE index still decides under races.
        if self._users.get_by_email(email):
            raise DuplicateIdentityError("Email already exists")

        user = self._users.create_user(
            email=email,
            password_hash=self._hasher.hash(password),
            name=name,
            department=department,
            role=role,
        )
        logger.info("Registered user id=%s role=%s", user.id, user.role.value)
        return user

    def list_team(self) -> Sequence[PublicUser]:
        return self._users.list_public()

    def ensure_admin(self, *, email: str, password: str, name: str = "Administrator") -> bool:
        """Create the bootstrap admin account when the store has no admin yet.

        Nothing is created if any admin exists or the email is already taken.
        Returns True when an account was created.
        """
        if self._users.exists_with_role(Role.ADMIN):
            return False
        if self._users.get_by_email(email):
            logger.warning("Bootstrap admin email is taken by a non-admin account")
            return False
        try:
            self.register(email=email, password=password, name=name, department="Management", role=Role.ADMIN)
        except DuplicateIdentityError:
            # Another process created it between the lookup and the insert.
            return False
        logger.info("Bootstrap admin account created")
        return True


class AuthService:
    """Use case: authenticate (register + login) and mint session tokens."""

    def __init__(self, users: UserRepository, user_service: UserService, hasher: PasswordHasher, tokens: TokenService):
        self._users = users
        self._user_service = user_service
        self._hasher = hasher
        self._tokens = tokens

    def _result_for(self, user: User) -> AuthResult:
        return AuthResult(token=self._tokens.issue(claim_for(user)), user=user.to_public())

    def register(self, *, email: str, password: str, name: str, department: Optional[str] = None) -> AuthResult:
        user = self._user_service.register(email=email, password=password, name=name, department=department)
        return self._result_for(user)

    def login(self, email: Optional[str], password: Optional[str]) -> AuthResult:
        if not isinstance(email, str) or not isinstance(password, str) or not email.strip():
            raise AuthenticationError(INVALID_CREDENTIALS)

        user = self._users.get_by_email(email.strip())
        if user is None:
            logger.warning("Login failed: unknown email")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not self._hasher.verify(password, user.password_hash):
            logger.warning("Login failed: bad password for user id=%s", user.id)
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("User id=%s logged in", user.id)
        return self._result_for(user)
