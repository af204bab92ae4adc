"""Low-level HTTP client for the users REST API.

Handles URL building, timeouts and error normalization.
"""
from __future__ import annotations
import logging
import os
from typing import Any, Callable, Optional

import requests

from .exceptions import NotFoundError, RequestError, ValidationError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10
VALIDATION_STATUSES = (400, 422)


class ApiClient:
    """HTTP client for the users REST API.

    Features:
    - Paths are joined onto a single base URL
    - Every call uses the configured timeout
    - Every failure is raised as ValidationError, NotFoundError or RequestError

    Usage:
        client = ApiClient("http://localhost:5000/api")
        payload = client.get("/users")
    """

    def __init__(self, base_url: Optional[str] = None, timeout: float = REQUEST_TIMEOUT):
        """Initialize API client.

        Args:
            base_url: API base URL (defaults to API_BASE_URL env var)
            timeout: Per-request timeout in seconds
        """
        self.base_url = (base_url or os.environ.get("API_BASE_URL", "http://localhost:5000/api")).rstrip("/")
        self.timeout = timeout

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        """Execute GET request and return the decoded JSON body.

        Raises:
            NotFoundError: On 404
            RequestError: On transport failure or unexpected response
        """
        return self._send(requests.get, path, params=params)

    def post(self, path: str, json: Optional[dict] = None) -> Any:
        """Execute POST request and return the decoded JSON body.

        Raises:
            ValidationError: When the server reports field-level problems
            NotFoundError: On 404
            RequestError: On transport failure or unexpected response
        """
        return self._send(requests.post, path, json=json)

    def put(self, path: str, json: Optional[dict] = None) -> Any:
        """Execute PUT request and return the decoded JSON body.

        Raises:
            ValidationError: When the server reports field-level problems
            NotFoundError: On 404
            RequestError: On transport failure or unexpected response
        """
        return self._send(requests.put, path, json=json)

    def delete(self, path: str) -> Any:
        """Execute DELETE request; returns the decoded body, or None when empty."""
        return self._send(requests.delete, path)

    def _send(self, func: Callable[..., requests.Response], path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            resp = func(url, headers={"Accept": "application/json"}, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise RequestError(None) from exc
        self._handle_error(resp)
        return self._decode(resp)

    def _decode(self, resp: requests.Response) -> Any:
        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("Malformed JSON from %s (status %s)", resp.url, resp.status_code)
            raise RequestError(None, resp.status_code) from exc

    def _handle_error(self, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.

        Args:
            resp: Response object to check

        Raises:
            ValidationError: 400/422 with an ``errors`` list in the body
            NotFoundError: 404
            RequestError: Any other status >= 400
        """
        if resp.status_code < 400:
            return

        try:
            body = resp.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}
        message = body.get("message") or None
        logger.warning("%s -> %s: %s", resp.url, resp.status_code, message)

        if resp.status_code == 404:
            raise NotFoundError(message)
        if resp.status_code in VALIDATION_STATUSES and isinstance(body.get("errors"), list):
            raise ValidationError(message, body["errors"])
        raise RequestError(message, resp.status_code)
