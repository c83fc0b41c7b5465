"""System endpoints (health check)."""

from flask import Blueprint, current_app, jsonify

system_bp = Blueprint("system", __name__)


@system_bp.route("/health", methods=["GET"])
def health_check():
    """Liveness only; the Country API is not contacted."""
    return jsonify({
        "status": "ok",
        "country_api": current_app.config["COUNTRY_API_BASE_URL"],
        "render_mode": current_app.config["RESPONSE_RENDER_MODE"],
    }), 200
