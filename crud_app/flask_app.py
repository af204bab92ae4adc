"""Flask application factory and bootstrap.

This module provides the create_app() factory function for initializing
the Flask application with all blueprints and configuration.
"""
from __future__ import annotations
import logging
import os
from tempfile import gettempdir
from typing import Optional

from flask import Flask
from flask_session import Session

from crud_app.config import AppConfig, load_settings
from crud_app.core.api import ApiClient, UserService

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Application Factory
# ─────────────────────────────────────────────────────────────────────────────
def create_app(cfg: Optional[AppConfig] = None) -> Flask:
    """Create and configure Flask application."""
    # Load configuration
    cfg = cfg or load_settings()
    logging.basicConfig(level=cfg.log_level)

    # Create Flask app
    app = Flask(__name__)

    # Store config for easy access in routes
    app.config["APP_CONFIG"] = cfg
    app.config["USER_SERVICE"] = UserService(ApiClient(cfg.api_base_url, timeout=cfg.request_timeout))

    # Flask session configuration (backs flash messages)
    app.config["SECRET_KEY"] = cfg.secret_key
    app.config["SESSION_TYPE"] = os.environ.get("FLASK_SESSION_TYPE", "filesystem")
    if app.config["SESSION_TYPE"] == "filesystem":
        session_dir = os.environ.get("FLASK_SESSION_DIR") or os.path.join(gettempdir(), "crud_app_flask_session")
        os.makedirs(session_dir, exist_ok=True)
        app.config["SESSION_FILE_DIR"] = session_dir

    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["SESSION_COOKIE_SECURE"] = cfg.session_cookie_secure

    # Initialize session
    Session(app)

    # Register blueprints
    from crud_app.api import errors, health, users

    app.register_blueprint(health.bp)
    app.register_blueprint(users.bp)

    # Register error handlers
    errors.register_error_handlers(app)

    # Log startup info
    mode_label = "DEMO" if cfg.demo_mode else "PRODUCTION"
    logger.info("[flask_app] Mode=%s; users API at %s", mode_label, cfg.api_base_url)

    if cfg.demo_mode:
        logger.warning("[flask_app] Demo mode active - do not deploy with demo settings")

    return app
