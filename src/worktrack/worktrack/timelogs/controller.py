from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file

from ..core.constants import EXPORT_FILENAME, XLSX_MIMETYPE
from ..core.exceptions import InvalidTransitionError, ValidationError
from ..container import Container
from ..security.tokens import SessionClaim

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    token_required = container.authenticator.token_required

    @app.route("/api/track", methods=["POST"], endpoint="api_track")
    @token_required
    def api_track(claim: SessionClaim):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            container.timelog_service.track(claim.id, data.get("type"), data.get("note"))
            return jsonify({"success": True})
        except InvalidTransitionError as e:
            return jsonify({"error": str(e)}), 409
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Tracking failed for user id=%s", claim.id)
            return jsonify({"error": "Internal server error"}), 500

    @app.route("/api/logs", methods=["GET"], endpoint="api_logs")
    @token_required
    def api_logs(claim: SessionClaim):
        try:
            entries = container.timelog_service.history(claim.id)
            return jsonify([e.to_dict() for e in entries])
        except Exception:
            logger.exception("Loading logs failed for user id=%s", claim.id)
            return jsonify({"error": "Internal server error"}), 500

    @app.route("/api/status", methods=["GET"], endpoint="api_status")
    @token_required
    def api_status(claim: SessionClaim):
        try:
            state = container.timelog_service.current_state(claim.id)
            return jsonify({"state": state.value})
        except Exception:
            logger.exception("Loading status failed for user id=%s", claim.id)
            return jsonify({"error": "Internal server error"}), 500

    @app.route("/api/stats/today", methods=["GET"], endpoint="api_stats_today")
    @token_required
    def api_stats_today(claim: SessionClaim):
        try:
            return jsonify({"count": container.timelog_service.count_on(claim.id)})
        except Exception:
            logger.exception("Loading stats failed for user id=%s", claim.id)
            return jsonify({"error": "Internal server error"}), 500

    @app.route("/api/export", methods=["GET"], endpoint="api_export")
    @token_required
    def api_export(claim: SessionClaim):
        try:
            content = container.timelog_service.export_workbook()
        except Exception:
            logger.exception("Export failed")
            return jsonify({"error": "Internal server error"}), 500
        return send_file(
            io.BytesIO(content),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=EXPORT_FILENAME,
        )
