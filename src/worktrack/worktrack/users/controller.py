from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container
from ..security.tokens import SessionClaim

logger = logging.getLogger(__name__)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register(app: Flask, container: Container) -> None:
    token_required = container.authenticator.token_required

    @app.route("/api/register", methods=["POST"], endpoint="api_register")
    def api_register():
        data = _json_body()
        try:
            result = container.auth_service.register(
                email=data.get("email"),
                password=data.get("password"),
                name=data.get("name"),
                department=data.get("department"),
            )
            return jsonify(result.to_dict())
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Registration failed")
            return jsonify({"error": "Internal server error"}), 500

    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def api_login():
        data = _json_body()
        try:
            result = container.auth_service.login(data.get("email"), data.get("password"))
            return jsonify(result.to_dict())
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401
        except Exception:
            logger.exception("Login failed")
            return jsonify({"error": "Internal server error"}), 500

    @app.route("/api/users", methods=["GET"], endpoint="api_users")
    @token_required
    def api_users(claim: SessionClaim):
        try:
            users = container.user_service.list_team()
            return jsonify([u.to_dict() for u in users])
        except Exception:
            logger.exception("Listing users failed")
            return jsonify({"error": "Internal server error"}), 500
