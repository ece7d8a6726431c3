from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object, no DB access code. ``password_hash`` is never the plaintext.
    """

    id: int
    email: str
    password_hash: str
    name: str
    role: Role
    department: str

    def to_public(self) -> "PublicUser":
        return PublicUser(
            id=self.id,
            email=self.email,
            name=self.name,
            role=self.role,
            department=self.department,
        )


@dataclass(frozen=True)
class PublicUser:
    """Projection returned by list/auth endpoints (no password hash)."""

    id: int
    email: str
    name: str
    role: Role
    department: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "department": self.department,
        }
