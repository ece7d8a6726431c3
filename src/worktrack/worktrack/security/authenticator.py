from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import jsonify, request

from ..core.exceptions import ForbiddenError, UnauthenticatedError
from .tokens import SessionClaim, TokenService

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.strip().split(None, 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    token = parts[1].strip()
    return token or None


class BearerAuthenticator:
    """Gate in front of protected routes.

    Missing token -> UnauthenticatedError (401); token present but not
    verifiable -> ForbiddenError (403).
    """

    def __init__(self, tokens: TokenService):
        self._tokens = tokens

    def authenticate(self, authorization: Optional[str]) -> SessionClaim:
        token = extract_bearer_token(authorization)
        if token is None:
            raise UnauthenticatedError("Authentication required")

        claim = self._tokens.verify(token)
        if claim is None:
            raise ForbiddenError("Invalid or expired token")
        return claim

    def token_required(self, view):
        """Decorator: call ``view(claim, *args, **kwargs)`` with the verified claim."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                claim = self.authenticate(request.headers.get("Authorization"))
            except UnauthenticatedError as e:
                return jsonify({"error": str(e)}), 401
            except ForbiddenError as e:
                logger.info("Rejected bearer token on %s %s", request.method, request.path)
                return jsonify({"error": str(e)}), 403
            return view(claim, *args, **kwargs)

        return wrapper
