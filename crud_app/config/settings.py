"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
import secrets
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 10.0
DEMO_API_BASE_URL = "http://localhost:5000/api"


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    # Priority 1: Read from /run/secrets
    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
        except OSError as exc:
            logger.warning("[settings] Failed to read /run/secrets/%s: %s", secret_name, exc)
        else:
            if secret_value:
                logger.info("[settings] Loaded %s from /run/secrets", secret_name)
                return secret_value

    # Priority 2: Fallback to environment variable
    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            return secret_value

    return None


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() == "true"


@dataclass
class AppConfig:
    """Application configuration container."""
    # Mode
    demo_mode: bool

    # Flask
    secret_key: str
    session_cookie_secure: bool = True

    # Users API
    api_base_url: str = DEMO_API_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    # Logging
    log_level: str = "INFO"


def _request_timeout() -> float:
    raw = os.environ.get("API_REQUEST_TIMEOUT")
    if raw is None or not raw.strip():
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"API_REQUEST_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"API_REQUEST_TIMEOUT must be positive, got {raw!r}")
    return timeout


def load_settings() -> AppConfig:
    """Load application settings from environment and /run/secrets."""
    demo_mode = _env_flag("DEMO_MODE")

    # Flask secret key
    secret_key = _load_secret_from_file("flask_secret_key", "FLASK_SECRET_KEY")
    if not secret_key:
        if not demo_mode:
            raise RuntimeError("FLASK_SECRET_KEY not found in /run/secrets or environment")
        secret_key = secrets.token_urlsafe(48)
        os.environ["FLASK_SECRET_KEY"] = secret_key
        logger.info("[demo-mode] Generated temporary FLASK_SECRET_KEY")

    # Users API
    api_base_url = os.environ.get("API_BASE_URL", "").strip()
    if not api_base_url:
        if not demo_mode:
            raise RuntimeError("Environment variable API_BASE_URL is required in production mode.")
        api_base_url = DEMO_API_BASE_URL
        logger.info("[demo-mode] Using default API_BASE_URL=%s", api_base_url)

    session_cookie_secure = _env_flag("FLASK_SESSION_COOKIE_SECURE", "true")
    log_level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    mode_label = "DEMO" if demo_mode else "PRODUCTION"
    logger.info("[settings] Mode=%s; api=%s", mode_label, api_base_url)

    return AppConfig(
        demo_mode=demo_mode,
        secret_key=secret_key,
        session_cookie_secure=session_cookie_secure,
        api_base_url=api_base_url.rstrip("/"),
        request_timeout=_request_timeout(),
        log_level=log_level,
    )
