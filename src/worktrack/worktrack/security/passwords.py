from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

logger = logging.getLogger(__name__)

DEFAULT_HASH_METHOD = "scrypt"


class PasswordHasher:
    """Salted one-way password hashing.

    ``method`` is any werkzeug hash method string, so the work factor is tunable
    (e.g. ``"scrypt:32768:8:1"`` or ``"pbkdf2:sha256:600000"``). werkzeug generates a
    fresh random salt per call and compares digests in constant time.
    """

    def __init__(self, method: str = DEFAULT_HASH_METHOD, salt_length: int = 16):
        self._method = method
        self._salt_length = int(salt_length)

    def hash(self, plaintext: str) -> str:
        return generate_password_hash(plaintext, method=self._method, salt_length=self._salt_length)

    def verify(self, plaintext: str, digest: str | None) -> bool:
        if not digest or plaintext is None:
            return False
        try:
            return check_password_hash(digest, plaintext)
        except Exception:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            logger.warning("Unreadable password hash encountered during verification")
            return False
