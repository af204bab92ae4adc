"""Tests for health check endpoints."""
from unittest.mock import MagicMock

import pytest
from flask import Flask

from crud_app.api.health import bp as health_bp
from crud_app.core.api import RequestError, UserService


@pytest.fixture()
def users_api():
    return MagicMock(spec=UserService)


@pytest.fixture()
def client(users_api):
    app = Flask(__name__)
    app.config["USER_SERVICE"] = users_api
    app.register_blueprint(health_bp)
    with app.test_client() as client:
        yield client


def test_health_check(client, users_api):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.data == b"ok"
    assert response.content_type.startswith("text/plain")
    users_api.list_users.assert_not_called()


def test_readiness_check(client, users_api):
    users_api.list_users.return_value = []
    response = client.get("/ready")
    assert response.status_code == 200
    assert response.data == b"ready"


def test_readiness_check_when_api_down(client, users_api):
    users_api.list_users.side_effect = RequestError(None)
    response = client.get("/ready")
    assert response.status_code == 503
    assert response.content_type.startswith("text/plain")
