from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import PublicUser, User


class UserRepository(Protocol):
    """Repository interface for User (the credential store).

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        email: str,
        password_hash: str,
        name: str,
        department: str,
        role: Role = Role.EMPLOYEE,
    ) -> User:
        """Insert a user; raises DuplicateIdentityError if the email exists."""

        raise NotImplementedError

    def list_public(self) -> Sequence[PublicUser]:
        raise NotImplementedError

    def exists_with_role(self, role: Role) -> bool:
        raise NotImplementedError
