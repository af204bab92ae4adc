"""Pytest shared fixtures."""
import json
import os
import pathlib
import sys
from unittest.mock import MagicMock

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Configure test environment BEFORE any app imports
os.environ.setdefault("DEMO_MODE", "true")

import pytest
import requests

from crud_app.config import AppConfig
from crud_app.core.api import UserService
from crud_app.core.models import User


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from hitting a live users API.

    Integration tests are explicitly marked with @pytest.mark.integration and
    are allowed to perform real HTTP calls by skipping this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _unexpected(method):
        def _stub(url, *args, **kwargs):
            raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")
        return _stub

    for method in ("get", "post", "put", "delete"):
        monkeypatch.setattr(requests, method, _unexpected(method.upper()))


@pytest.fixture()
def make_response():
    """Build real ``requests.Response`` objects for stubbed HTTP calls."""
    def _make(status_code: int = 200, payload=None, text: str = None, url: str = "http://api.test/users"):
        resp = requests.Response()
        resp.status_code = status_code
        resp.url = url
        if text is not None:
            resp._content = text.encode()
        elif payload is not None:
            resp._content = json.dumps(payload).encode()
            resp.headers["Content-Type"] = "application/json"
        else:
            resp._content = b""
        return resp
    return _make


# ─────────────────────────────────────────────────────────────────────────────
# Domain fixtures
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture()
def make_user():
    def _make(user_id="1", name="Ann", email="ann@example.com", age=30, profession="Engineer"):
        return User(id=str(user_id), name=name, email=email, age=age, profession=profession)
    return _make


@pytest.fixture()
def service():
    """UserService double; configure return values per test."""
    return MagicMock(spec=UserService)


@pytest.fixture()
def notifier():
    return MagicMock()


@pytest.fixture()
def navigator():
    return MagicMock()


# ─────────────────────────────────────────────────────────────────────────────
# Flask Test Client
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture()
def app_config():
    return AppConfig(
        demo_mode=True,
        secret_key="test-secret",
        session_cookie_secure=False,
        api_base_url="http://api.test",
        request_timeout=5,
        log_level="WARNING",
    )


@pytest.fixture()
def flask_app(monkeypatch, tmp_path, app_config, service):
    """Flask app whose users API is the ``service`` double."""
    monkeypatch.setenv("FLASK_SESSION_DIR", str(tmp_path / "sessions"))
    from crud_app.flask_app import create_app

    app = create_app(app_config)
    app.config.update(TESTING=True, USER_SERVICE=service)
    return app


@pytest.fixture()
def client(flask_app):
    with flask_app.test_client() as client:
        yield client
