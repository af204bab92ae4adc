"""Health check endpoints."""
from flask import Blueprint, current_app

from crud_app.core.api import ApiError

bp = Blueprint("health", __name__)


@bp.route("/health")
def health_check():
    """Basic health check endpoint."""
    return ("ok", 200, {"Content-Type": "text/plain"})


@bp.route("/ready")
def readiness_check():
    """Readiness check: the users API must answer a list request."""
    try:
        current_app.config["USER_SERVICE"].list_users()
    except ApiError:
        return ("users api unavailable", 503, {"Content-Type": "text/plain"})
    return ("ready", 200, {"Content-Type": "text/plain"})
