from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .common.logging_config import setup_logging
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .timelogs.controller import register as register_timelogs
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def resolve_jwt_secret(settings) -> str:
    secret = getattr(settings, "JWT_SECRET", None)
    if secret:
        return secret
    if getattr(settings, "REQUIRE_JWT_SECRET", False):
        raise RuntimeError("JWT_SECRET must be set in this environment")
    logger.warning("JWT_SECRET is not set; using the insecure development secret")
    return getattr(settings, "DEV_JWT_SECRET")


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))

    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 3000))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        container = build_container(
            db_config=db_config,
            jwt_secret=resolve_jwt_secret(settings),
            token_ttl_hours=float(getattr(settings, "TOKEN_TTL_HOURS", 0)),
            hash_method=getattr(settings, "PASSWORD_HASH_METHOD", "scrypt"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))

        if bool(getattr(settings, "BOOTSTRAP_ADMIN", True)):
            container.user_service.ensure_admin(
                email=getattr(settings, "ADMIN_EMAIL"),
                password=getattr(settings, "ADMIN_PASSWORD"),
                name=getattr(settings, "ADMIN_NAME", "Administrator"),
            )

    app.extensions["worktrack"] = container

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def api_health():
        return jsonify({"status": "ok"})

    register_users(app, container)
    register_timelogs(app, container)

    return app
