from __future__ import annotations

import hmac
import logging
from functools import wraps

from flask import Flask, current_app, jsonify, request

from ..core.exceptions import ConflictError, DomainError, NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def cron_secret_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            secret = current_app.config.get("CRON_SECRET")
            if secret:
                header = request.headers.get("Authorization", "")
                if not hmac.compare_digest(header, f"Bearer {secret}"):
                    return jsonify({"error": "Unauthorized"}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(ConflictError)
    def handle_conflict(e: ConflictError):
        # Clients treat "already checked out" as a bad request.
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.route("/api/attendances/<int:attendance_id>", methods=["GET"], endpoint="attendance_detail")
    def attendance_detail(attendance_id: int):
        try:
            record = container.attendance_service.get_record(attendance_id)
        except DomainError:
            raise
        except Exception:
            logger.exception("Loading attendance %s failed", attendance_id)
            return jsonify({"error": "Failed to load attendance"}), 500
        return jsonify(record.to_dict())

    @app.route("/api/attendances/<int:attendance_id>/checkout", methods=["POST"], endpoint="attendance_checkout")
    def attendance_checkout(attendance_id: int):
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")

        try:
            record = container.attendance_service.check_out(
                attendance_id,
                latitude=data.get("latitude"),
                longitude=data.get("longitude"),
            )
        except DomainError:
            raise
        except Exception:
            logger.exception("Checkout failed for attendance %s", attendance_id)
            return jsonify({"error": "Failed to save checkout"}), 500
        return jsonify(record.to_dict())

    @app.route("/api/cron/auto-checkout", methods=["POST"], endpoint="cron_auto_checkout")
    @cron_secret_required
    def cron_auto_checkout():
        try:
            result = container.attendance_service.auto_checkout_pending()
        except Exception:
            logger.exception("Auto checkout run failed")
            return jsonify({"error": "Auto checkout failed"}), 500
        return jsonify(result.to_dict())
