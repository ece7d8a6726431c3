from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..core.constants import TOKEN_ALGORITHM
from ..core.enums import Role

logger = logging.getLogger(__name__)

_CLAIM_FIELDS = ("id", "email", "role", "name", "department")


@dataclass(frozen=True)
class SessionClaim:
    """Identity snapshot embedded in a bearer token."""

    id: int
    email: str
    role: Role
    name: str
    department: str

    def to_payload(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "role": self.role.value,
            "name": self.name,
            "department": self.department,
        }


class TokenService:
    """Issues and verifies signed session tokens (HS256 JWT).

    The secret is fixed for the lifetime of the instance. With ``ttl`` unset,
    tokens carry no ``exp`` claim and stay valid until the secret changes.
    """

    def __init__(self, secret: str, *, ttl: Optional[timedelta] = None):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._ttl = ttl if ttl and ttl.total_seconds() > 0 else None

    def issue(self, claim: SessionClaim, *, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = claim.to_payload()
        payload["iat"] = now
        if self._ttl is not None:
            payload["exp"] = now + self._ttl
        return jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: str) -> Optional[SessionClaim]:
        if not token or not isinstance(token, str):
            return None
        try:
            payload = jwt.decode(token, self._secret, algorithms=[TOKEN_ALGORITHM])
        except jwt.PyJWTError as exc:
            logger.debug("Token rejected: %s", exc)
            return None

        if any(field not in payload for field in _CLAIM_FIELDS):
            logger.debug("Token rejected: missing claim fields")
            return None
        try:
            return SessionClaim(
                id=int(payload["id"]),
                email=str(payload["email"]),
                role=Role(payload["role"]),
                name=str(payload["name"]),
                department=str(payload["department"]),
            )
        except (TypeError, ValueError):
            logger.debug("Token rejected: malformed claim values")
            return None
